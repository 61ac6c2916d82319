import math
import time
from typing import Callable, Optional

from app.core.config import settings
from app.core.exceptions import InvalidRequest

SECONDS_PER_YEAR = 365 * 24 * 60 * 60

# Keeps expires_at well inside a 64-bit integer column
MAX_EXPIRE_YEARS = 1000

Clock = Callable[[], int]


def now_seconds() -> int:
    """Current Unix time in whole seconds"""
    return int(time.time())


def is_expired(expires_at: int, now: int) -> bool:
    # Strict: a resource is still valid at exactly its boundary second
    return now > expires_at


def lifetime_years(years: Optional[float]) -> float:
    """Missing or non-positive lifetimes fall back to the configured default"""
    if years is None:
        return settings.DEFAULT_EXPIRE_YEARS
    if not math.isfinite(years) or years > MAX_EXPIRE_YEARS:
        raise InvalidRequest(f"Lifetime must be at most {MAX_EXPIRE_YEARS} years")
    if years <= 0:
        return settings.DEFAULT_EXPIRE_YEARS
    return years


def expires_after(now: int, years: Optional[float]) -> int:
    return int(now + lifetime_years(years) * SECONDS_PER_YEAR)
