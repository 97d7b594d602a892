"""FastAPI dependency injection helpers."""

from fastapi import Request

from ridedispatch.services.engine import DispatchEngine


def get_engine(request: Request) -> DispatchEngine:
    """Return the dispatch engine owned by the running application."""
    return request.app.state.engine
