"""Shared dependencies and helper functions for API routers.

Usage in routers:
    from api.dependencies import get_repository
"""
from __future__ import annotations

from functools import lru_cache

from sqlalchemy.engine import Engine

from contact_book.config import Settings, load_settings
from contact_book.db import ContactRepository, create_db_engine


# =============================================================================
# Configuration Constants
# =============================================================================

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


# =============================================================================
# Cached Functions
# =============================================================================

@lru_cache
def get_settings() -> Settings:
    """Get application settings (cached)."""
    return load_settings()


@lru_cache
def get_engine() -> Engine:
    """Get the shared database engine (cached)."""
    return create_db_engine(get_settings())


def get_repository() -> ContactRepository:
    """Repository dependency; tests override this to point at SQLite."""
    return ContactRepository(get_engine())
