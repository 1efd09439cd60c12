"""Shared constants for the Steam shortcut icon downloader."""

# Community CDN that serves the per-app icon files referenced by shortcuts
STEAM_CDN = "https://steamcdn-a.akamaihd.net/steamcommunity/public/images/apps"

# Shortcuts created by Steam launch games through this URL scheme
STEAM_URL_PREFIX = "steam://rungameid/"

# Internet shortcut files: extension (without dot, case-sensitive) and section name
SHORTCUT_EXTENSION = "url"
SHORTCUT_SECTION = "InternetShortcut"
URL_KEY = "URL"
ICON_FILE_KEY = "IconFile"

CONFIG_FILENAME = "icons_config.json"

# Rotating log file settings
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3
