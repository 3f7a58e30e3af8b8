#!/usr/bin/env python3
# src/gcp_monitored_resource/config.py
"""
Resolver settings read from environment variables.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .constants import (
    DEFAULT_METADATA_HOST,
    DEFAULT_METADATA_TIMEOUT,
    ENV_METADATA_HOST,
    ENV_METADATA_TIMEOUT,
    ENV_NAMESPACE_FILE,
    KUBERNETES_NAMESPACE_ID_PATH,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolverSettings:
    """Where the default collaborators look for metadata and the namespace file."""

    metadata_host: str = DEFAULT_METADATA_HOST
    metadata_timeout: float = DEFAULT_METADATA_TIMEOUT
    namespace_path: str = KUBERNETES_NAMESPACE_ID_PATH

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "ResolverSettings":
        """Build settings from ``env`` (defaults to ``os.environ``) at call time."""
        env = os.environ if env is None else env

        return cls(
            metadata_host=env.get(ENV_METADATA_HOST) or DEFAULT_METADATA_HOST,
            metadata_timeout=_parse_timeout(env.get(ENV_METADATA_TIMEOUT)),
            namespace_path=env.get(ENV_NAMESPACE_FILE) or KUBERNETES_NAMESPACE_ID_PATH,
        )


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_METADATA_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.debug(f"Ignoring invalid {ENV_METADATA_TIMEOUT}={raw!r}")
        return DEFAULT_METADATA_TIMEOUT
    if timeout <= 0:
        logger.debug(f"Ignoring non-positive {ENV_METADATA_TIMEOUT}={raw!r}")
        return DEFAULT_METADATA_TIMEOUT
    return timeout
