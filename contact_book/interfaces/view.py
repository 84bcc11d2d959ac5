"""Presentation state for the contact list.

The view holds a small render tree (list items, empty state, modal form,
search box) and turns user events into calls on the handlers the controller
registers. It never reads contacts on its own; whatever sequence it is handed
is what it shows.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Callable, List, Optional, Sequence

from ..contacts.models import Contact

ADD_TITLE = "Add Contact"
EDIT_TITLE = "Edit Contact"
EMPTY_STATE_TEXT = "No contacts yet. Add one to get started."

SaveHandler = Callable[[str, str, str, str], None]
ContactIdHandler = Callable[[str], None]
EditHandler = Callable[[str], Optional[Contact]]
SearchHandler = Callable[[str], None]


def _noop() -> None:
    return None


@dataclass(slots=True)
class ContactItem:
    """One rendered row with its own edit/delete actions."""

    id: str
    initials: str
    name: str
    email: str
    phone: str
    on_edit: Callable[[], None] = _noop
    on_delete: Callable[[], None] = _noop


@dataclass(slots=True)
class ContactForm:
    id: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""

    def reset(self) -> None:
        self.id = ""
        self.name = ""
        self.email = ""
        self.phone = ""


def get_initials(name: str) -> str:
    """First letter of a one-word name, else first and last word initials."""
    words = name.split()
    if not words:
        return ""
    if len(words) == 1:
        return words[0][0].upper()
    return (words[0][0] + words[-1][0]).upper()


@dataclass
class ContactView:
    items: List[ContactItem] = field(default_factory=list)
    list_visible: bool = False
    empty_state_visible: bool = True
    search_value: str = ""
    modal_open: bool = False
    modal_title: str = ""
    form: ContactForm = field(default_factory=ContactForm)

    _save_handler: Optional[SaveHandler] = field(default=None, repr=False)
    _delete_handler: Optional[ContactIdHandler] = field(default=None, repr=False)
    _edit_handler: Optional[EditHandler] = field(default=None, repr=False)
    _search_handler: Optional[SearchHandler] = field(default=None, repr=False)

    # ==========================================
    # UI helpers
    # ==========================================

    def open_modal(self, title: str) -> None:
        self.modal_title = title
        self.modal_open = True

    def close_modal(self) -> None:
        self.modal_open = False
        self.form.reset()

    def open_add_form(self) -> None:
        """The "add contact" button: blank form in add mode."""
        self.form.reset()
        self.open_modal(ADD_TITLE)

    def clear_search(self) -> None:
        self.search_value = ""

    def find_item(self, contact_id: str) -> Optional[ContactItem]:
        for item in self.items:
            if item.id == contact_id:
                return item
        return None

    # ==========================================
    # Render
    # ==========================================

    def display_contacts(self, contacts: Sequence[Contact]) -> None:
        """Replace the rendered list with ``contacts``."""
        self.items = []
        if not contacts:
            self.list_visible = False
            self.empty_state_visible = True
            return

        self.list_visible = True
        self.empty_state_visible = False
        for contact in contacts:
            self.items.append(
                ContactItem(
                    id=contact.id,
                    initials=get_initials(contact.name),
                    name=contact.name,
                    email=contact.email,
                    phone=contact.phone,
                    on_edit=partial(self._request_edit, contact.id),
                    on_delete=partial(self._request_delete, contact.id),
                )
            )

    def render_text(self) -> str:
        """Plain-text rendering of the list for terminals."""
        if self.empty_state_visible:
            return EMPTY_STATE_TEXT
        lines = [f"=== Contacts ({len(self.items)}) ==="]
        for idx, item in enumerate(self.items, 1):
            lines.append(
                f"[{idx:02d}] ({item.initials:>2}) {item.name} | {item.email} | {item.phone}"
            )
        return "\n".join(lines)

    # ==========================================
    # User events
    # ==========================================

    def submit_form(self) -> bool:
        """Send the form to the save handler when every field is filled in."""
        contact_id = self.form.id.strip()
        name = self.form.name.strip()
        email = self.form.email.strip()
        phone = self.form.phone.strip()
        if not (name and email and phone):
            return False
        if self._save_handler is not None:
            self._save_handler(contact_id, name, email, phone)
        self.close_modal()
        return True

    def set_search(self, text: str) -> None:
        """Search box input; the handler gets the trimmed lower-case term."""
        self.search_value = text
        if self._search_handler is not None:
            self._search_handler(text.lower().strip())

    def _request_delete(self, contact_id: str) -> None:
        if self._delete_handler is not None:
            self._delete_handler(contact_id)

    def _request_edit(self, contact_id: str) -> None:
        if self._edit_handler is None:
            return
        contact = self._edit_handler(contact_id)
        if contact is None:
            return
        self.form.id = contact.id
        self.form.name = contact.name
        self.form.email = contact.email
        self.form.phone = contact.phone
        self.open_modal(EDIT_TITLE)

    # ==========================================
    # Bindings
    # ==========================================

    def bind_save_contact(self, handler: SaveHandler) -> None:
        self._save_handler = handler

    def bind_delete_contact(self, handler: ContactIdHandler) -> None:
        self._delete_handler = handler

    def bind_edit_contact(self, handler: EditHandler) -> None:
        self._edit_handler = handler

    def bind_search_contact(self, handler: SearchHandler) -> None:
        self._search_handler = handler
