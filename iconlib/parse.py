"""Shortcut parsing helpers for the Steam icon downloader."""
import configparser
from pathlib import Path

from iconlib.exceptions import IconNameError, NotASteamShortcut, ShortcutParseError
from iconlib.models import ShortcutRecord
from iconutils.constants import ICON_FILE_KEY, SHORTCUT_SECTION, STEAM_URL_PREFIX, URL_KEY
from iconutils.filenames import icon_file_name


def _new_parser() -> configparser.ConfigParser:
    """INI parser that keeps values raw: no interpolation, only '=' splits keys, keys keep their case."""
    parser = configparser.ConfigParser(
        interpolation=None,
        # [DEFAULT] is an ordinary section in shortcut files; keep its keys out of [InternetShortcut]
        default_section="\n",
        delimiters=('=',),
        strict=False,
        empty_lines_in_values=False,
    )
    parser.optionxform = str
    return parser


def parse_shortcut_text(text: str, path: Path) -> ShortcutRecord:
    """Build a ShortcutRecord from the contents of a .url file.

    Raises ShortcutParseError when the text is not valid INI, or when the
    [InternetShortcut] section or one of its URL / IconFile keys is missing.
    """
    parser = _new_parser()
    try:
        parser.read_string(text, source=str(path))
    except configparser.Error as e:
        raise ShortcutParseError(f"Failed to parse '{path}': {e}") from e

    if not parser.has_section(SHORTCUT_SECTION):
        raise ShortcutParseError(f"No [{SHORTCUT_SECTION}] section in '{path}'")
    section = parser[SHORTCUT_SECTION]

    url = section.get(URL_KEY)
    if url is None:
        raise ShortcutParseError(f"No {URL_KEY} in '{path}'")

    icon_file = section.get(ICON_FILE_KEY)
    if icon_file is None:
        raise ShortcutParseError(f"No {ICON_FILE_KEY} in '{path}'")

    return ShortcutRecord(path=path, url=url, icon_file=icon_file)


def read_shortcut(path: Path) -> ShortcutRecord:
    """Open and parse a single .url shortcut file."""
    try:
        # utf-8-sig drops the BOM some Windows tools write
        with open(path, 'r', encoding='utf-8-sig', errors='replace') as f:
            text = f.read()
    except OSError as e:
        raise ShortcutParseError(f"Failed to open '{path}': {e}") from e
    return parse_shortcut_text(text, path)


def extract_game_id(record: ShortcutRecord) -> str:
    """Return the Steam game id from a steam://rungameid/<id> URL.

    The id is kept as an opaque string; the only requirement is that
    something follows the prefix.
    """
    url = record.url
    if not url.startswith(STEAM_URL_PREFIX):
        raise NotASteamShortcut(
            f"Skipping '{record.path}' because it does not have a steam url attached to it ('{url}')"
        )
    game_id = url[len(STEAM_URL_PREFIX):]
    if not game_id:
        raise NotASteamShortcut(f"Failed to extract steam id from '{url}'")
    return game_id


def resolve_icon_name(record: ShortcutRecord) -> str:
    """Base filename of the shortcut's IconFile entry."""
    name = icon_file_name(record.icon_file)
    if name is None:
        raise IconNameError(f"Failed to get icon file name from '{record.icon_file}'")
    return name
