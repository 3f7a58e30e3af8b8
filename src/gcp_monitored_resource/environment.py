#!/usr/bin/env python3
# src/gcp_monitored_resource/environment.py
"""
Google Cloud environment detection.
"""

import logging
import os
from collections.abc import Mapping

from .base import EnvironmentSignal, MetadataProvider
from .constants import (
    GCP_FUNCTION_NAME,
    GCP_FUNCTION_TARGET,
    GCP_GAE_MODULE_NAME,
    GCP_GAE_SERVICE,
    METADATA_PATH_CLUSTER_NAME,
)
from .errors import MetadataServerError
from .metadata import HttpMetadataProvider
from .types import GCPEnvironment

logger = logging.getLogger(__name__)


class GCPEnvironmentDetector(EnvironmentSignal):
    """Works out which Google Cloud runtime the process is in.

    App Engine and Cloud Functions are recognised from environment
    variables. Anything else needs the metadata server: a reachable server
    with a ``cluster-name`` attribute means GKE, a reachable server without
    one means Compute Engine.
    """

    def __init__(
        self,
        metadata: MetadataProvider | None = None,
        env: Mapping[str, str] | None = None,
    ):
        self.metadata = metadata or HttpMetadataProvider()
        self._env = env

    @property
    def env(self) -> Mapping[str, str]:
        return os.environ if self._env is None else self._env

    async def get_env(self) -> str:
        """Detect the environment. Detection results are not cached."""
        if self._is_app_engine():
            environment = GCPEnvironment.APP_ENGINE
        elif self._is_cloud_functions():
            environment = GCPEnvironment.CLOUD_FUNCTIONS
        elif await self.metadata.is_available():
            if await self._is_kubernetes_engine():
                environment = GCPEnvironment.KUBERNETES_ENGINE
            else:
                environment = GCPEnvironment.COMPUTE_ENGINE
        else:
            environment = GCPEnvironment.NONE

        logger.debug(f"Detected environment: {environment.value}")
        return environment.value

    def _is_app_engine(self) -> bool:
        """Check if running in App Engine."""
        return bool(self.env.get(GCP_GAE_SERVICE) or self.env.get(GCP_GAE_MODULE_NAME))

    def _is_cloud_functions(self) -> bool:
        """Check if running in Cloud Functions."""
        return bool(self.env.get(GCP_FUNCTION_NAME) or self.env.get(GCP_FUNCTION_TARGET))

    async def _is_kubernetes_engine(self) -> bool:
        """Check for the GKE cluster-name attribute."""
        try:
            await self.metadata.instance(METADATA_PATH_CLUSTER_NAME)
        except MetadataServerError as e:
            logger.debug(f"No cluster-name attribute: {e}")
            return False
        return True
