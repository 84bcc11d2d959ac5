"""Contacts Router - CRUD over the contacts table.

Handles:
- Listing every contact in insertion order
- Creating a contact with a client-generated id
- Replacing a contact's fields by id
- Deleting a contact by id
- Rejecting PUT/DELETE that omit the id

Mounted at /api/contacts. Each operation is a single SQL statement; database
failures surface as 500 responses.
"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from api.dependencies import get_repository
from api.models import (
    ContactCreateRequest,
    ContactFieldsRequest,
    ContactResponse,
    MessageResponse,
)
from contact_book.contacts.models import Contact
from contact_book.db import ContactRepository

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_FIELDS = "Missing required fields"


@router.get("", response_model=List[ContactResponse])
@router.get("/", response_model=List[ContactResponse], include_in_schema=False)
def list_contacts(repo: ContactRepository = Depends(get_repository)) -> list:
    """List all contacts."""
    try:
        return repo.list_all()
    except SQLAlchemyError as exc:
        logger.error(f"[API] Fetch error: {exc}")
        raise HTTPException(status_code=500, detail="Database error fetching contacts")


@router.post("", status_code=201, response_model=MessageResponse)
@router.post("/", status_code=201, response_model=MessageResponse, include_in_schema=False)
def create_contact(
    request: ContactCreateRequest,
    repo: ContactRepository = Depends(get_repository),
) -> dict:
    """Insert a contact using the id supplied by the client."""
    if not request.complete:
        raise HTTPException(status_code=400, detail=MISSING_FIELDS)

    contact = Contact(
        id=request.id,
        name=request.name,
        email=request.email,
        phone=request.phone,
    )
    try:
        repo.insert(contact)
    except SQLAlchemyError as exc:
        logger.error(f"[API] Insert error: {exc}")
        raise HTTPException(status_code=500, detail="Error adding contact")
    return {"message": "Contact added successfully"}


@router.put("/{contact_id}", response_model=MessageResponse)
def update_contact(
    contact_id: str,
    request: ContactFieldsRequest,
    repo: ContactRepository = Depends(get_repository),
) -> dict:
    """Replace name, email and phone of an existing contact."""
    if not request.complete:
        raise HTTPException(status_code=400, detail=MISSING_FIELDS)

    try:
        updated = repo.update(contact_id, request.name, request.email, request.phone)
    except SQLAlchemyError as exc:
        logger.error(f"[API] Update error: {exc}")
        raise HTTPException(status_code=500, detail="Error updating contact")
    if not updated:
        raise HTTPException(status_code=404, detail="Contact not found")
    return {"message": "Contact updated successfully"}


@router.delete("/{contact_id}", response_model=MessageResponse)
def delete_contact(
    contact_id: str,
    repo: ContactRepository = Depends(get_repository),
) -> dict:
    """Remove a contact by id."""
    try:
        deleted = repo.delete(contact_id)
    except SQLAlchemyError as exc:
        logger.error(f"[API] Delete error: {exc}")
        raise HTTPException(status_code=500, detail="Error deleting contact")
    if not deleted:
        raise HTTPException(status_code=404, detail="Contact not found")
    return {"message": "Contact deleted successfully"}


@router.api_route("/", methods=["PUT", "DELETE"], include_in_schema=False)
def missing_contact_id() -> None:
    """PUT or DELETE without an id in the path."""
    raise HTTPException(status_code=400, detail="Contact ID required")
