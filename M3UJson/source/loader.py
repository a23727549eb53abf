# 19.10.26

import os
import logging
from typing import Optional


# External library
import httpx


# Internal utilities
from M3UJson.utils.http_client import create_client


# Variable
logger = logging.getLogger(__name__)


class PlaylistLoadError(Exception):
    pass


def is_remote(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _expand_user_path(path: str) -> str:
    return os.path.normpath(os.path.expandvars(os.path.expanduser(path)))


def read_playlist_file(path: str) -> str:
    path = _expand_user_path(path)
    if not os.path.isfile(path):
        raise PlaylistLoadError(f"Playlist file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise PlaylistLoadError(f"Playlist {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise PlaylistLoadError(f"Cannot read playlist {path}: {e}") from e


def fetch_playlist(url: str, client: Optional[httpx.Client] = None) -> str:
    """Download a remote playlist with the shared httpx client settings."""
    own_client = client is None
    client = client or create_client()

    try:
        logger.info(f"Downloading playlist: {url}")
        response = client.get(url)
        response.raise_for_status()
        return response.content.decode('utf-8-sig')

    except httpx.HTTPStatusError as e:
        raise PlaylistLoadError(f"HTTP {e.response.status_code} while downloading {url}") from e
    except httpx.HTTPError as e:
        raise PlaylistLoadError(f"Cannot download {url}: {e}") from e
    except UnicodeDecodeError as e:
        raise PlaylistLoadError(f"Playlist at {url} is not valid UTF-8: {e}") from e

    finally:
        if own_client:
            client.close()


def load_playlist(source: str, client: Optional[httpx.Client] = None) -> str:
    """
    Return the text of a playlist given a local path or an http(s) URL.

    Raises:
        PlaylistLoadError: When the document cannot be obtained.
    """
    source = (source or "").strip().strip('"').strip("'")
    if not source:
        raise PlaylistLoadError("No playlist path provided")

    if is_remote(source):
        return fetch_playlist(source, client)
    return read_playlist_file(source)
