"""Shared library for the Steam shortcut icon downloader.

This package contains the pieces the runner strings together:
- parse.py: reading .url shortcut files and extracting Steam game ids
- fetch.py: downloading icons from the Steam CDN
- models.py / exceptions.py: records and errors passed between them
"""

# No exports needed - import directly from submodules
__all__ = []
