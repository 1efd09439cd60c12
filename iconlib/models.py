"""
iconlib/models.py – Data carried through one run of the downloader.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple


@dataclass(frozen=True)
class ShortcutRecord:
    """
    The two values read from one shortcut's [InternetShortcut] section.

    Attributes
    ----------
    path      : The .url file the values came from (used in messages).
    url       : Raw ``URL`` value.
    icon_file : Raw ``IconFile`` value.
    """

    path: Path
    url: str
    icon_file: str


@dataclass
class RunSummary:
    """Outcome of one pass over the shortcuts directory."""

    downloaded: int = 0
    skipped: List[Tuple[Path, str]] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.downloaded} downloaded, {len(self.skipped)} skipped"
