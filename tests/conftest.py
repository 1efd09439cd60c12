"""Pytest configuration for steam-url-icons tests."""
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add the project root to path so tests can import the runner and packages
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))


def fake_response(status_code=200, content=b'', reason='OK'):
    """Response-like object with the attributes fetch_icon uses."""
    return SimpleNamespace(status_code=status_code, reason=reason, content=content, close=lambda: None)


class FakeSession:
    """Records requested URLs and answers with a canned response (or raises)."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else fake_response(content=b'ICON')
        self.error = error
        self.calls = []

    def get(self, url, stream=None, **kwargs):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def steam_and_shortcuts(tmp_path):
    steam = tmp_path / 'Steam'
    shortcuts = tmp_path / 'Desktop'
    steam.mkdir()
    shortcuts.mkdir()
    return steam, shortcuts


def write_shortcut(folder: Path, name: str, url='steam://rungameid/123', icon_file='C:\\icons\\game.ico'):
    lines = ['[{000214A0-0000-0000-C000-000000000046}]', 'Prop3=19,0', '[InternetShortcut]', 'IDList=']
    if url is not None:
        lines.append(f'URL={url}')
    if icon_file is not None:
        lines.append(f'IconFile={icon_file}')
    lines.append('IconIndex=0')
    path = folder / name
    path.write_text('\r\n'.join(lines) + '\r\n', encoding='utf-8')
    return path
