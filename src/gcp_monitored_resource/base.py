#!/usr/bin/env python3
# src/gcp_monitored_resource/base.py
"""
Collaborator interfaces consumed by the resolver.
"""

from abc import ABC, abstractmethod

from .constants import NAMESPACE_FILE_ENCODING
from .types import MetadataResponse


class MetadataProvider(ABC):
    """Reads instance attributes from the cloud metadata server."""

    @abstractmethod
    async def instance(self, path: str) -> MetadataResponse:
        """Fetch ``path`` relative to the instance metadata root."""

    @abstractmethod
    async def is_available(self) -> bool:
        """Whether a metadata server answers at all; never raises."""


class FileReader(ABC):
    """Reads local files as text."""

    @abstractmethod
    async def read_file(self, path: str, encoding: str = NAMESPACE_FILE_ENCODING) -> str:
        """Return the contents of ``path`` decoded with ``encoding``."""


class EnvironmentSignal(ABC):
    """Reports which Google Cloud runtime the process belongs to."""

    @abstractmethod
    async def get_env(self) -> str:
        """Return one of the GCPEnvironment tokens, or any other string for "none"."""
