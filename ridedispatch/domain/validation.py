"""Input checks shared by registration and ride requests."""

from typing import Optional

from .errors import InvalidInput


def require_text(**fields: Optional[str]) -> None:
    """Raise ``InvalidInput`` naming every field that is missing or blank."""
    missing = [name for name, value in fields.items() if not value or not value.strip()]
    if missing:
        raise InvalidInput(f"Required field(s) empty: {', '.join(missing)}")
