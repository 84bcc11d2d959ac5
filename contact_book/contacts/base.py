"""Shared state and change notification for contact models."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .models import Contact

logger = logging.getLogger(__name__)

ContactListCallback = Callable[[List[Contact]], None]


class ContactModel:
    """In-memory contact collection with ordered change subscribers.

    Subclasses own persistence. They must only call ``_commit`` after a
    mutation has been persisted, so subscribers never see unsaved state.
    """

    def __init__(self) -> None:
        self._contacts: List[Contact] = []
        self._subscribers: List[ContactListCallback] = []

    @property
    def contacts(self) -> List[Contact]:
        """Snapshot of the collection in insertion order."""
        return list(self._contacts)

    def list_contacts(self) -> List[Contact]:
        return self.contacts

    def bind_contact_list_changed(self, callback: ContactListCallback) -> None:
        """Register a callback run after every successful mutation."""
        self._subscribers.append(callback)

    def unbind_contact_list_changed(self, callback: ContactListCallback) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def get_by_id(self, contact_id: str) -> Optional[Contact]:
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        return None

    def _commit(self) -> None:
        snapshot = self.contacts
        for callback in list(self._subscribers):
            callback(snapshot)

    # Operations implemented per variant.

    def fetch_contacts(self) -> None:
        raise NotImplementedError

    def add(self, name: str, email: str, phone: str) -> Optional[Contact]:
        raise NotImplementedError

    def edit(self, contact_id: str, name: str, email: str, phone: str) -> bool:
        raise NotImplementedError

    def delete(self, contact_id: str) -> bool:
        raise NotImplementedError
