#!/usr/bin/env python3
"""
Steam shortcut icon downloader (canonical runner)

Windows internet shortcuts created by Steam (``*.url`` files with
``URL=steam://rungameid/<id>``) point their ``IconFile`` at an icon inside the
Steam installation. When that icon is missing the shortcut shows a blank
icon. This script walks a folder of such shortcuts and downloads every
missing icon from the Steam community CDN into the Steam directory.

Usage:
    python download_icons.py "C:/Program Files (x86)/Steam" "C:/Users/me/Desktop"

Behavior summary:
- Only direct children of the shortcuts folder ending in ``.url`` are read.
- Shortcuts that are not Steam game shortcuts, or whose icon already exists,
  are skipped with a warning. Nothing is ever overwritten.
- Every problem with a single shortcut is reported and the run continues;
  only missing input paths or an unreadable shortcuts folder stop the run.

Configuration note:
- An optional ``icons_config.json`` (current directory first, then next to
  this script) can override the CDN base URL and User-Agent, and enable a
  rotating log file with per-shortcut detail:

    {
      "network": {"cdn_base": "https://...", "user_agent": "..."},
      "logging": {"log_file": "icons.log", "level": "INFO"}
    }
"""

import argparse
import json
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Iterator, List, Optional

import requests

from iconlib.exceptions import FatalError, ShortcutSkipped
from iconlib.fetch import build_icon_url, fetch_icon, get_session, resolve_target, write_icon
from iconlib.models import RunSummary
from iconlib.parse import extract_game_id, read_shortcut, resolve_icon_name
from iconutils.constants import CONFIG_FILENAME, LOG_BACKUP_COUNT, LOG_MAX_BYTES, STEAM_CDN
from iconutils.filenames import has_shortcut_extension

__version__ = "0.1.0"


def _print_status(label: str, message: str):
    print(f"{label}: {message}")


def warn(message: str):
    _print_status('warning', message)


def default_config_paths() -> List[Path]:
    """Places searched for icons_config.json, in order of preference."""
    return [Path.cwd() / CONFIG_FILENAME, Path(__file__).parent / CONFIG_FILENAME]


def load_config(paths: Optional[List[Path]] = None) -> Dict:
    """Load the first icons_config.json found; a broken file is reported and ignored."""
    for cfg_path in (paths if paths is not None else default_config_paths()):
        if not cfg_path.exists():
            continue
        try:
            with open(cfg_path, 'r', encoding='utf-8') as f:
                cfg = json.load(f)
        except (OSError, ValueError) as e:
            warn(f"Could not read config '{cfg_path}': {e}")
            return {}
        if not isinstance(cfg, dict):
            warn(f"Ignoring config '{cfg_path}': expected a JSON object")
            return {}
        return cfg
    return {}


def validate_paths(steam_path: str, url_path: str):
    """Make sure both input paths exist before any work starts.

    This is only a pre-check; the shortcuts folder is read again later and
    a failure at that point is reported separately.
    """
    steam_dir = Path(steam_path)
    url_dir = Path(url_path)
    if not steam_dir.exists():
        raise FatalError("Steam path does not exist")
    if not url_dir.exists():
        raise FatalError("URL path does not exist")
    return steam_dir, url_dir


class IconDownloader:
    """Downloads missing icons for the Steam shortcuts in one folder"""

    def __init__(self, steam_dir: Path, url_dir: Path, config: Optional[Dict] = None, session: Optional[requests.Session] = None):
        """
        Args:
            steam_dir: Steam installation directory; icons are written here
            url_dir: Folder containing the .url shortcut files
            config: Parsed icons_config.json (see module docstring)
            session: requests session to use (mainly for tests)
        """
        self.steam_dir = Path(steam_dir)
        self.url_dir = Path(url_dir)
        cfg = config or {}

        net = cfg.get('network', {}) or {}
        self.cdn_base = net.get('cdn_base') or STEAM_CDN
        self.session = session if session is not None else get_session(net.get('user_agent'))

        self.logger = self._setup_logger(cfg.get('logging', {}) or {})

    def _setup_logger(self, log_cfg: Dict) -> Optional[logging.Logger]:
        """Attach a rotating file log when one is configured."""
        log_file = log_cfg.get('log_file')
        if not log_file:
            return None
        try:
            log_path = Path(log_file)
            if not log_path.is_absolute():
                log_path = self.url_dir / log_path
            logger = logging.getLogger(f'IconDownloader:{log_path}')
            logger.propagate = False
            # Avoid adding duplicate handlers when reusing the same logger
            if not logger.handlers:
                handler = RotatingFileHandler(str(log_path), maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding='utf-8')
                handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(message)s'))
                logger.addHandler(handler)
            logger.setLevel(str(log_cfg.get('level', 'INFO')).upper())
            return logger
        except (OSError, ValueError) as e:
            # Logging should never block the run
            warn(f"Could not set up log file '{log_file}': {e}")
            return None

    def _log(self, level: int, message: str):
        if self.logger:
            self.logger.log(level, message)

    def iter_shortcuts(self) -> Iterator[Path]:
        """Yield the .url files directly inside the shortcuts folder, sorted by name.

        Raises FatalError if the folder itself cannot be listed. Entries that
        cannot be inspected are reported and skipped; directories and files
        with other extensions are skipped silently.
        """
        try:
            with os.scandir(self.url_dir) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise FatalError(f"Failed to read URL path: {e}") from e

        for entry in entries:
            try:
                is_file = entry.is_file()
            except OSError as e:
                warn(f"Failed to read directory entry '{entry.path}': {e}")
                continue
            path = Path(entry.path)
            if is_file and has_shortcut_extension(path):
                yield path

    def process_shortcut(self, path: Path) -> Path:
        """Download the icon for one shortcut; returns where it was written.

        Raises a ShortcutSkipped subclass at the first step that fails.
        """
        record = read_shortcut(path)
        game_id = extract_game_id(record)
        icon_name = resolve_icon_name(record)
        target = resolve_target(self.steam_dir, icon_name, path)

        icon_url = build_icon_url(game_id, icon_name, self.cdn_base)
        _print_status('downloading', icon_url)
        self._log(logging.INFO, f"Downloading icon for {path.name} (app {game_id}): {icon_url}")

        data = fetch_icon(self.session, icon_url)
        write_icon(target, data)
        self._log(logging.INFO, f"Wrote {len(data)} bytes to {target}")
        return target

    def run(self) -> RunSummary:
        """Process every shortcut once and return the tally."""
        summary = RunSummary()
        for path in self.iter_shortcuts():
            try:
                self.process_shortcut(path)
            except ShortcutSkipped as e:
                warn(str(e))
                self._log(logging.WARNING, str(e))
                summary.skipped.append((path, str(e)))
                continue
            summary.downloaded += 1
        self._log(logging.INFO, f"Run finished for {self.url_dir}: {summary}")
        return summary

    def report(self, summary: RunSummary):
        """Print the final line of the run."""
        if summary.downloaded > 0:
            _print_status('done', f"{summary.downloaded} icons have been downloaded")
        else:
            print("Nothing has changed")


def main(argv=None):
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Download missing Steam game icons for .url shortcuts")
    parser.add_argument('steam_path', help='Path to the Steam installation directory (icons are saved here)')
    parser.add_argument('url_path', help='Path to the folder containing the .url shortcut files')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    args = parser.parse_args(argv)

    try:
        steam_dir, url_dir = validate_paths(args.steam_path, args.url_path)
        downloader = IconDownloader(steam_dir, url_dir, config=load_config())
        summary = downloader.run()
    except FatalError as e:
        _print_status('error', str(e))
        raise SystemExit(e.exit_code)

    downloader.report(summary)


if __name__ == "__main__":
    main()
