"""Rate limiting shared by every router."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from valet_delivery.config import get_settings

RATE_LIMIT = get_settings().rate_limit

limiter = Limiter(key_func=get_remote_address)
