"""Pydantic request/response models for the contacts API."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from contact_book.contacts.models import has_required_fields


class ContactFieldsRequest(BaseModel):
    """Editable contact fields; presence is checked by the handler, not here."""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @property
    def complete(self) -> bool:
        return has_required_fields(self.name, self.email, self.phone)


class ContactCreateRequest(ContactFieldsRequest):
    """Request body for creating a contact; the client generates the id."""
    id: Optional[str] = None

    @property
    def complete(self) -> bool:
        return bool(self.id and self.id.strip()) and has_required_fields(
            self.name, self.email, self.phone
        )


class ContactResponse(BaseModel):
    id: str
    name: str
    email: str
    phone: str


class MessageResponse(BaseModel):
    message: str
