"""Contact model persisted to a local key-value store."""
from __future__ import annotations

import json
import logging
from typing import List, Optional

from .base import ContactModel
from .models import Contact, new_contact_id
from .storage import KeyValueStorage, StorageError

logger = logging.getLogger(__name__)

STORAGE_KEY = "contacts"


class LocalContactModel(ContactModel):
    """Keeps the collection as a single JSON array under ``STORAGE_KEY``.

    Every mutation rewrites the whole blob. If the write fails the in-memory
    collection is left untouched and no subscriber is notified.
    """

    def __init__(self, storage: KeyValueStorage, *, key: str = STORAGE_KEY) -> None:
        super().__init__()
        self.storage = storage
        self.key = key
        self._contacts = self._load()

    def _load(self) -> List[Contact]:
        try:
            raw = self.storage.get_item(self.key)
        except StorageError as exc:
            logger.error(f"[Contacts] Could not read stored contacts: {exc}")
            return []
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning(f"[Contacts] Stored contacts are not valid JSON, starting empty: {exc}")
            return []
        if not isinstance(data, list):
            logger.warning("[Contacts] Stored contacts are not a list, starting empty")
            return []
        contacts = [Contact.from_dict(item) for item in data if isinstance(item, dict)]
        loaded = [contact for contact in contacts if contact.id]
        skipped = len(data) - len(loaded)
        if skipped:
            logger.warning(f"[Contacts] Skipped {skipped} malformed stored record(s)")
        return loaded

    def _persist(self, contacts: List[Contact]) -> bool:
        blob = json.dumps([contact.to_dict() for contact in contacts])
        try:
            self.storage.set_item(self.key, blob)
        except StorageError as exc:
            logger.error(f"[Contacts] Failed to save contacts: {exc}")
            return False
        return True

    def _apply(self, contacts: List[Contact]) -> bool:
        if not self._persist(contacts):
            return False
        self._contacts = contacts
        self._commit()
        return True

    def fetch_contacts(self) -> None:
        """Render whatever was loaded at construction; no storage I/O."""
        self._commit()

    def add(self, name: str, email: str, phone: str) -> Optional[Contact]:
        contact = Contact(id=new_contact_id(), name=name, email=email, phone=phone)
        if not self._apply(self._contacts + [contact]):
            return None
        return contact

    def edit(self, contact_id: str, name: str, email: str, phone: str) -> bool:
        if self.get_by_id(contact_id) is None:
            return False
        updated = [
            contact.replace_fields(name, email, phone) if contact.id == contact_id else contact
            for contact in self._contacts
        ]
        return self._apply(updated)

    def delete(self, contact_id: str) -> bool:
        if self.get_by_id(contact_id) is None:
            return False
        remaining = [contact for contact in self._contacts if contact.id != contact_id]
        return self._apply(remaining)
