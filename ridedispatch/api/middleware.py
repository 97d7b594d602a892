"""
Rate limiting shared by every router (slowapi, keyed on client address).

Routes are decorated with ``current_rate_limit`` rather than a fixed string,
so slowapi reads the limit on each request and ``create_app`` can apply the
value from the ``Settings`` it was given.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from ridedispatch.config import settings

limiter = Limiter(key_func=get_remote_address)

_rate_limit: str = settings.rate_limit


def configure_rate_limit(rate_limit: str) -> None:
    global _rate_limit
    _rate_limit = rate_limit


def current_rate_limit() -> str:
    return _rate_limit
