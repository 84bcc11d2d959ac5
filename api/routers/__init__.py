"""API Routers Package.

Routers:
- contacts.py: Contact list, create, replace and delete (4 endpoints)

Usage in main.py:
    from api.routers import contacts_router

    app.include_router(contacts_router, prefix="/api/contacts", tags=["contacts"])
"""

from .contacts import router as contacts_router

__all__ = [
    "contacts_router",
]
