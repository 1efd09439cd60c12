"""Network fetch helpers for the Steam icon downloader."""
from pathlib import Path
from typing import Optional

import requests

from iconlib.exceptions import DownloadError, IconExistsError, StorageError
from iconutils.constants import STEAM_CDN


def get_session(user_agent: Optional[str] = None) -> requests.Session:
    """Return the session used for every icon request of a run."""
    session = requests.Session()
    if user_agent:
        session.headers['User-Agent'] = user_agent
    return session


def build_icon_url(game_id: str, icon_name: str, cdn_base: str = STEAM_CDN) -> str:
    """CDN location of an app icon: <cdn_base>/<game_id>/<icon_name>."""
    return f"{cdn_base.rstrip('/')}/{game_id}/{icon_name}"


def resolve_target(steam_dir: Path, icon_name: str, shortcut_path: Path) -> Path:
    """Destination of the icon inside the Steam directory.

    Existing icons are never replaced. The check is not atomic with the
    later write; a file appearing in between gets overwritten.
    """
    target = steam_dir / icon_name
    if target.exists():
        raise IconExistsError(f"Skipping '{shortcut_path}' because '{target}' already exists")
    return target


def _status_text(response) -> str:
    reason = getattr(response, 'reason', '') or ''
    return f"{response.status_code} {reason}".strip()


def fetch_icon(session: requests.Session, icon_url: str) -> bytes:
    """GET an icon and return its bytes.

    A single blocking request with the session's defaults: no timeout,
    no retries, redirects followed the way requests follows them.
    """
    try:
        response = session.get(icon_url, stream=True)
    except requests.RequestException as e:
        raise DownloadError(f"Failed to get icon from '{icon_url}': {e}") from e

    try:
        if not 200 <= response.status_code < 300:
            raise DownloadError(f"Failed to get icon from '{icon_url}': {_status_text(response)}")
        try:
            return response.content
        except requests.RequestException as e:
            raise DownloadError(f"Failed to get icon from '{icon_url}': {e}") from e
    finally:
        response.close()


def write_icon(target: Path, data: bytes) -> None:
    """Write icon bytes to `target`. A failed write may leave a truncated file behind."""
    try:
        with open(target, 'wb') as f:
            f.write(data)
    except (OSError, ValueError) as e:
        raise StorageError(f"Failed to write icon to '{target}': {e}") from e
