"""Contact record shared by the local and remote variants."""
from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass
from typing import Any, Dict


def _text(value: Any) -> str:
    """Coerce a stored field to a string; missing or null becomes empty."""
    return "" if value is None else str(value)


def new_contact_id() -> str:
    """Return a fresh identifier for a contact."""
    return str(uuid.uuid4())


@dataclass(slots=True, frozen=True)
class Contact:
    """A single entry in the contact list; replace fields via ``replace_fields``."""

    id: str
    name: str
    email: str
    phone: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Contact:
        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            email=_text(data.get("email")),
            phone=_text(data.get("phone")),
        )

    def replace_fields(self, name: str, email: str, phone: str) -> Contact:
        """Return a copy with every editable field replaced and the id kept."""
        return Contact(id=self.id, name=name, email=email, phone=phone)


def has_required_fields(name: str | None, email: str | None, phone: str | None) -> bool:
    """True when name, email and phone are all present and non-blank."""
    return all(value is not None and value.strip() for value in (name, email, phone))
