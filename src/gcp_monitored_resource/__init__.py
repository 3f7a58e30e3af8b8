#!/usr/bin/env python3
"""
gcp_monitored_resource - work out which Google Cloud runtime a process is in
and describe it as a monitored resource for log entries.

    import asyncio
    from gcp_monitored_resource import get_default_resource

    resource = asyncio.run(get_default_resource())
    print(resource.to_dict())
    # {'type': 'gce_instance', 'labels': {'instance_id': '1234567890'}}
"""

from collections.abc import Mapping

from .base import EnvironmentSignal, FileReader, MetadataProvider
from .config import ResolverSettings
from .descriptors import (
    get_cloud_function_descriptor,
    get_gae_descriptor,
    get_gce_descriptor,
    get_gke_descriptor,
    get_global_descriptor,
)
from .environment import GCPEnvironmentDetector
from .errors import MetadataServerError, MonitoredResourceError, NamespaceReadError
from .filesystem import LocalFileReader
from .metadata import HttpMetadataProvider
from .resolver import DescriptorBuilders, MonitoredResourceResolver
from .types import GCPEnvironment, MetadataResponse, MonitoredResource, ResourceType

__version__ = "0.1.0"


def create_resolver(
    env: Mapping[str, str] | None = None,
    settings: ResolverSettings | None = None,
) -> MonitoredResourceResolver:
    """Build a resolver wired to the HTTP metadata server and the local filesystem."""
    settings = settings or ResolverSettings.from_env(env)
    metadata = HttpMetadataProvider(settings)
    return MonitoredResourceResolver(
        signal=GCPEnvironmentDetector(metadata, env=env),
        metadata=metadata,
        file_reader=LocalFileReader(),
        env=env,
        namespace_path=settings.namespace_path,
    )


async def get_default_resource(
    env: Mapping[str, str] | None = None,
    settings: ResolverSettings | None = None,
) -> MonitoredResource:
    """Resolve the monitored resource for the current process once."""
    return await create_resolver(env, settings).get_default_resource()


__all__ = [
    "DescriptorBuilders",
    "EnvironmentSignal",
    "FileReader",
    "GCPEnvironment",
    "GCPEnvironmentDetector",
    "HttpMetadataProvider",
    "LocalFileReader",
    "MetadataProvider",
    "MetadataResponse",
    "MetadataServerError",
    "MonitoredResource",
    "MonitoredResourceError",
    "MonitoredResourceResolver",
    "NamespaceReadError",
    "ResolverSettings",
    "ResourceType",
    "create_resolver",
    "get_cloud_function_descriptor",
    "get_default_resource",
    "get_gae_descriptor",
    "get_gce_descriptor",
    "get_gke_descriptor",
    "get_global_descriptor",
]
