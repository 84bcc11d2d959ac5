"""Controller wiring view events to model operations."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..contacts.base import ContactModel
from ..contacts.models import Contact
from ..contacts.search import filter_contacts
from .view import ContactView

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this contact?"

ConfirmPrompt = Callable[[str], bool]


def confirm_in_terminal(message: str) -> bool:
    """Blocking yes/no prompt; anything but y/yes declines."""
    answer = input(f"{message} [y/N] ").strip().lower()
    return answer in {"y", "yes"}


class ContactController:
    """Binds one model to one view and runs the initial load."""

    def __init__(
        self,
        model: ContactModel,
        view: ContactView,
        *,
        confirm: ConfirmPrompt = confirm_in_terminal,
    ) -> None:
        self.model = model
        self.view = view
        self.confirm = confirm

        self.model.bind_contact_list_changed(self.on_contact_list_changed)

        self.view.bind_save_contact(self.handle_save_contact)
        self.view.bind_delete_contact(self.handle_delete_contact)
        self.view.bind_edit_contact(self.handle_get_contact)
        self.view.bind_search_contact(self.handle_search_contact)

        self.model.fetch_contacts()

    def on_contact_list_changed(self, contacts: List[Contact]) -> None:
        self.view.display_contacts(contacts)

    def handle_save_contact(self, contact_id: str, name: str, email: str, phone: str) -> None:
        """Edit when the form carries an id, otherwise add."""
        if contact_id:
            self.model.edit(contact_id, name, email, phone)
        else:
            self.model.add(name, email, phone)
        self.view.clear_search()

    def handle_delete_contact(self, contact_id: str) -> None:
        if not self.confirm(DELETE_PROMPT):
            logger.debug(f"[Contacts] Delete of {contact_id} cancelled")
            return
        self.model.delete(contact_id)

    def handle_get_contact(self, contact_id: str) -> Optional[Contact]:
        return self.model.get_by_id(contact_id)

    def handle_search_contact(self, search_term: str) -> None:
        """Show matching contacts without touching the model."""
        self.view.display_contacts(filter_contacts(self.model.contacts, search_term))

    def refresh(self) -> None:
        """Reload from the model's backend and re-render."""
        self.view.clear_search()
        self.model.fetch_contacts()
