# Utilities package for steam-url-icons
from .filenames import icon_file_name, has_shortcut_extension
from .constants import STEAM_CDN, STEAM_URL_PREFIX, SHORTCUT_EXTENSION, SHORTCUT_SECTION

__all__ = ["icon_file_name", "has_shortcut_extension", "STEAM_CDN", "STEAM_URL_PREFIX", "SHORTCUT_EXTENSION", "SHORTCUT_SECTION"]
