#!/usr/bin/env python3
# src/gcp_monitored_resource/filesystem.py
"""
Local file reader used for the Kubernetes namespace file.
"""

import asyncio
from pathlib import Path

from .base import FileReader
from .constants import NAMESPACE_FILE_ENCODING


class LocalFileReader(FileReader):
    """Reads files off the event loop thread."""

    async def read_file(self, path: str, encoding: str = NAMESPACE_FILE_ENCODING) -> str:
        return await asyncio.to_thread(Path(path).read_text, encoding=encoding)
