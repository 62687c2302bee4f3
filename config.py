import os
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()


def get_env_var(name: str, default: Optional[str] = None) -> Optional[str]:
    """Get an environment variable, treating empty values as unset."""
    value = os.getenv(name)
    if not value:
        return default
    return value


def get_timezone(name: Optional[str]) -> Optional[ZoneInfo]:
    """Resolve DAYS_TIMEZONE, or None to use the system local zone."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise RuntimeError(
            f"❌ Unknown time zone in DAYS_TIMEZONE: {name!r}\n"
            f"👉 Use an IANA name such as 'Europe/Berlin', or unset it for local time."
        )


# Optional vars (with defaults)
DAYS_TIMEZONE = get_timezone(get_env_var("DAYS_TIMEZONE"))
LOG_LEVEL = get_env_var("LOG_LEVEL", "WARNING").upper()
DEBUG = get_env_var("DEBUG", "false").lower() == "true"
PORT = int(get_env_var("PORT", "8000"))
