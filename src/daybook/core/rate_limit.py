"""Per-client rate limiting for write endpoints open to any signed-in user.

Uses slowapi's in-memory storage, so limits are per process.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.daybook.core.config import get_settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=not get_settings().is_testing,
)
