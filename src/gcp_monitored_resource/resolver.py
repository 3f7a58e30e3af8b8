#!/usr/bin/env python3
# src/gcp_monitored_resource/resolver.py
"""
Environment resolver: ask the environment signal where we are running and
build the matching monitored resource descriptor.
"""

import logging
import os
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass

from .base import EnvironmentSignal, FileReader, MetadataProvider
from .constants import (
    ENV_APP_ENGINE,
    ENV_CLOUD_FUNCTIONS,
    ENV_COMPUTE_ENGINE,
    ENV_KUBERNETES_ENGINE,
    KUBERNETES_NAMESPACE_ID_PATH,
)
from .descriptors import (
    get_cloud_function_descriptor,
    get_gae_descriptor,
    get_gce_descriptor,
    get_gke_descriptor,
    get_global_descriptor,
)
from .types import MonitoredResource

logger = logging.getLogger(__name__)

EnvDescriptorBuilder = Callable[[Mapping[str, str] | None], MonitoredResource]
GCEDescriptorBuilder = Callable[[MetadataProvider], Awaitable[MonitoredResource]]
GKEDescriptorBuilder = Callable[[MetadataProvider, FileReader, str], Awaitable[MonitoredResource]]


@dataclass(frozen=True)
class DescriptorBuilders:
    """One descriptor strategy per environment kind."""

    app_engine: EnvDescriptorBuilder = get_gae_descriptor
    cloud_functions: EnvDescriptorBuilder = get_cloud_function_descriptor
    compute_engine: GCEDescriptorBuilder = get_gce_descriptor
    kubernetes_engine: GKEDescriptorBuilder = get_gke_descriptor
    fallback: Callable[[], MonitoredResource] = get_global_descriptor


class MonitoredResourceResolver:
    """Resolves the default monitored resource for the current process.

    Nothing is cached: every call re-reads the environment signal and the
    environment variables, so two calls only agree if the environment does.
    """

    def __init__(
        self,
        signal: EnvironmentSignal,
        metadata: MetadataProvider | None = None,
        file_reader: FileReader | None = None,
        builders: DescriptorBuilders | None = None,
        env: Mapping[str, str] | None = None,
        namespace_path: str = KUBERNETES_NAMESPACE_ID_PATH,
    ):
        self.signal = signal
        self.metadata = metadata
        self.file_reader = file_reader
        self.builders = builders or DescriptorBuilders()
        self.namespace_path = namespace_path
        self._env = env

    @property
    def env(self) -> Mapping[str, str]:
        return os.environ if self._env is None else self._env

    async def get_default_resource(self) -> MonitoredResource:
        """Detect the environment and build its descriptor.

        Errors from the environment signal and from the GCE/GKE builders
        propagate unchanged. Unrecognized signals resolve to the global
        descriptor.
        """
        environment = await self.signal.get_env()
        logger.debug(f"Environment signal: {environment}")

        if environment == ENV_APP_ENGINE:
            return self.builders.app_engine(self.env)
        elif environment == ENV_CLOUD_FUNCTIONS:
            return self.builders.cloud_functions(self.env)
        elif environment == ENV_COMPUTE_ENGINE:
            return await self.builders.compute_engine(self._require_metadata())
        elif environment == ENV_KUBERNETES_ENGINE:
            return await self.builders.kubernetes_engine(
                self._require_metadata(), self._require_file_reader(), self.namespace_path
            )
        else:
            logger.debug(f"No specific resource for {environment!r}, using global")
            return self.builders.fallback()

    def _require_metadata(self) -> MetadataProvider:
        if self.metadata is None:
            raise RuntimeError("A MetadataProvider is required to describe Compute Engine or GKE resources")
        return self.metadata

    def _require_file_reader(self) -> FileReader:
        if self.file_reader is None:
            raise RuntimeError("A FileReader is required to describe GKE resources")
        return self.file_reader
