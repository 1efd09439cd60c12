from pathlib import Path, PureWindowsPath
from typing import Optional

from .constants import SHORTCUT_EXTENSION


def icon_file_name(icon_file: str) -> Optional[str]:
    """Return the base filename of an ``IconFile`` value, or None if it has none.

    Shortcuts are written on Windows, so both backslashes and forward slashes
    separate directories (``C:\\icons\\game.ico`` -> ``game.ico``). Names that
    would not point at a file inside the target directory (``.``, ``..``)
    and names the filesystem cannot hold (embedded NUL) count as missing.
    """
    name = PureWindowsPath(icon_file.strip()).name
    if '\x00' in name or name in ('', '.', '..'):
        return None
    return name


def has_shortcut_extension(path: Path) -> bool:
    """True when `path` ends in exactly ``.url`` (case-sensitive, like the shell it came from)."""
    suffix = path.suffix
    if not suffix:
        return False
    return suffix[1:] == SHORTCUT_EXTENSION
