"""In-memory contact filtering."""
from __future__ import annotations

from typing import Iterable, List

from .models import Contact


def matches(contact: Contact, term: str) -> bool:
    """Case-insensitive match on name and email; phone is matched as typed."""
    needle = term.strip().lower()
    if not needle:
        return True
    return (
        needle in contact.name.lower()
        or needle in contact.email.lower()
        or needle in contact.phone
    )


def filter_contacts(contacts: Iterable[Contact], term: str) -> List[Contact]:
    """Return the contacts matching ``term``, preserving order."""
    return [contact for contact in contacts if matches(contact, term)]
