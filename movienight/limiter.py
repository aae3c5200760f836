from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import settings

# key_func: identifies the caller (IP address)
# storage_uri: "memory://" by default, a redis:// URI when running several workers
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI
)
