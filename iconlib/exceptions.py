"""
iconlib/exceptions.py – Exception hierarchy for the shortcut icon downloader.

Everything derives from IconToolError. Per-shortcut problems derive from
ShortcutSkipped: the run loop reports them and moves on to the next file.
FatalError aborts the whole run.
"""


class IconToolError(Exception):
    """Base class for all icon downloader exceptions."""


class FatalError(IconToolError):
    """Raised when the run cannot continue at all (missing paths, unlistable directory)."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.exit_code = exit_code
        super().__init__(message)


class ShortcutSkipped(IconToolError):
    """Raised when a single shortcut file has to be skipped."""


class ShortcutParseError(ShortcutSkipped):
    """Raised when a shortcut cannot be opened or parsed, or lacks a required section/key."""


class NotASteamShortcut(ShortcutSkipped):
    """Raised when the shortcut URL is not a steam://rungameid/ URL."""


class IconNameError(ShortcutSkipped):
    """Raised when no filename can be taken from the IconFile value."""


class IconExistsError(ShortcutSkipped):
    """Raised when the icon is already present in the Steam directory."""


class DownloadError(ShortcutSkipped):
    """Raised on network errors, non-2xx responses or failures reading the body."""


class StorageError(ShortcutSkipped):
    """Raised when the downloaded icon cannot be written to disk."""
