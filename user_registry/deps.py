from __future__ import annotations

from fastapi import Request

from user_registry.user_store import InMemoryUserStore


def get_store(request: Request) -> InMemoryUserStore:
    """FastAPI dependency for the registry store.

    create_app() attaches exactly one store per application. Tests can swap it
    through app.dependency_overrides.
    """
    return request.app.state.store
