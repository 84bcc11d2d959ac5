"""Contact records, storage backends and the local/remote models."""
from .base import ContactModel
from .local import STORAGE_KEY, LocalContactModel
from .models import Contact, has_required_fields, new_contact_id
from .remote import ContactAPIError, RemoteContactModel, list_remote_contacts
from .search import filter_contacts
from .storage import (
    FileStorage,
    KeyValueStorage,
    MemoryStorage,
    StorageError,
    get_storage,
)

__all__ = [
    # Records
    "Contact",
    "has_required_fields",
    "new_contact_id",
    # Models
    "ContactModel",
    "LocalContactModel",
    "RemoteContactModel",
    "ContactAPIError",
    "list_remote_contacts",
    "STORAGE_KEY",
    # Search
    "filter_contacts",
    # Storage
    "KeyValueStorage",
    "FileStorage",
    "MemoryStorage",
    "StorageError",
    "get_storage",
]
