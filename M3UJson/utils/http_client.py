# 19.10.26

from typing import Dict, Optional


# External library
import httpx


# Internal utilities
from .config_json import config_manager


# Variable
MAX_TIMEOUT = config_manager.config.get_int("REQUESTS", "timeout", default=15)
VERIFY_SSL = config_manager.config.get_bool("REQUESTS", "verify", default=True)


def get_userAgent() -> str:
    return config_manager.config.get("REQUESTS", "user_agent")


def get_headers() -> Dict[str, str]:
    return {
        'user-agent': get_userAgent(),
        'accept': '*/*',
    }


def create_client(headers: Optional[Dict[str, str]] = None, timeout: Optional[int] = None, transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """Build an httpx client with the configured timeout and SSL policy."""
    return httpx.Client(
        headers=headers or get_headers(),
        timeout=timeout or MAX_TIMEOUT,
        verify=VERIFY_SSL,
        follow_redirects=True,
        transport=transport
    )
