"""Contact model backed by the contacts HTTP API."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from .base import ContactModel
from .models import Contact, new_contact_id

logger = logging.getLogger(__name__)


class ContactAPIError(RuntimeError):
    """Raised when the contacts API is unreachable or returns an error."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteContactModel(ContactModel):
    """Mirrors the server's contact table in memory.

    The cache is updated only after the server confirms a change. It is not
    re-fetched after mutations; call ``fetch_contacts`` to reload.
    """

    def __init__(
        self,
        api_url: str,
        *,
        session: Any = None,
        timeout: Optional[float] = None,
    ) -> None:
        super().__init__()
        self.api_url = api_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _request(
        self,
        method: str,
        path: str = "",
        *,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.api_url}{path}"
        try:
            response = self.session.request(method, url, json=body, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ContactAPIError(f"Network error calling {method} {url}: {exc}") from exc

        if response.status_code >= 400:
            raise ContactAPIError(
                f"{method} {url} failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ContactAPIError(f"Invalid JSON from {method} {url}: {exc}") from exc

    def _get_contact_list(self) -> List[Contact]:
        """GET the collection; raises ContactAPIError unless it is a JSON array."""
        data = self._request("GET")
        if not isinstance(data, list):
            raise ContactAPIError(f"Unexpected contacts payload: {data!r}")
        contacts = [
            contact
            for contact in (Contact.from_dict(item) for item in data if isinstance(item, dict))
            if contact.id
        ]
        if len(contacts) != len(data):
            logger.warning(
                f"[Contacts] Skipped {len(data) - len(contacts)} malformed record(s) from server"
            )
        return contacts

    def fetch_contacts(self) -> None:
        """Replace the cache with the server's list and notify subscribers."""
        try:
            contacts = self._get_contact_list()
        except ContactAPIError as exc:
            logger.error(f"[Contacts] Error fetching contacts: {exc}")
            return
        self._contacts = contacts
        self._commit()

    def add(self, name: str, email: str, phone: str) -> Optional[Contact]:
        contact = Contact(id=new_contact_id(), name=name, email=email, phone=phone)
        try:
            self._request("POST", body=contact.to_dict())
        except ContactAPIError as exc:
            logger.error(f"[Contacts] Error adding contact: {exc}")
            return None
        self._contacts = self._contacts + [contact]
        self._commit()
        return contact

    def edit(self, contact_id: str, name: str, email: str, phone: str) -> bool:
        try:
            self._request(
                "PUT",
                f"/{contact_id}",
                body={"name": name, "email": email, "phone": phone},
            )
        except ContactAPIError as exc:
            if exc.status_code == 404:
                logger.error(f"[Contacts] Contact {contact_id} not found on server")
            else:
                logger.error(f"[Contacts] Error editing contact: {exc}")
            return False
        self._contacts = [
            contact.replace_fields(name, email, phone) if contact.id == contact_id else contact
            for contact in self._contacts
        ]
        self._commit()
        return True

    def delete(self, contact_id: str) -> bool:
        try:
            self._request("DELETE", f"/{contact_id}")
        except ContactAPIError as exc:
            if exc.status_code == 404:
                logger.error(f"[Contacts] Contact {contact_id} not found on server")
            else:
                logger.error(f"[Contacts] Error deleting contact: {exc}")
            return False
        self._contacts = [contact for contact in self._contacts if contact.id != contact_id]
        self._commit()
        return True


def list_remote_contacts(api_url: str, *, session: Any = None, timeout: Optional[float] = None) -> List[Contact]:
    """Fetch the server's contacts without wiring a view; raises ContactAPIError."""
    model = RemoteContactModel(api_url, session=session, timeout=timeout)
    return model._get_contact_list()
