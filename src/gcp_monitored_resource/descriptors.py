#!/usr/bin/env python3
# src/gcp_monitored_resource/descriptors.py
"""
Descriptor builders, one per environment kind.

App Engine, Cloud Functions and the global fallback only read environment
variables and are synchronous. Compute Engine and Kubernetes Engine talk to
the metadata server (and, for GKE, the namespace file) and are coroutines.
"""

import os
from collections.abc import Mapping

from .base import FileReader, MetadataProvider
from .constants import (
    GCP_FUNCTION_NAME,
    GCP_FUNCTION_REGION,
    GCP_GAE_MODULE_NAME,
    GCP_GAE_SERVICE,
    GCP_GAE_VERSION,
    KUBERNETES_NAMESPACE_ID_PATH,
    LABEL_CLUSTER_NAME,
    LABEL_FUNCTION_NAME,
    LABEL_INSTANCE_ID,
    LABEL_MODULE_ID,
    LABEL_NAMESPACE_ID,
    LABEL_REGION,
    LABEL_VERSION_ID,
    METADATA_PATH_CLUSTER_NAME,
    METADATA_PATH_INSTANCE_ID,
    NAMESPACE_FILE_ENCODING,
)
from .errors import NamespaceReadError
from .types import MonitoredResource, ResourceType


def _environ(env: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if env is None else env


def get_cloud_function_descriptor(env: Mapping[str, str] | None = None) -> MonitoredResource:
    """Describe a Cloud Function from FUNCTION_NAME and FUNCTION_REGION."""
    env = _environ(env)
    return MonitoredResource(
        type=ResourceType.CLOUD_FUNCTION,
        labels={
            LABEL_FUNCTION_NAME: env.get(GCP_FUNCTION_NAME),
            LABEL_REGION: env.get(GCP_FUNCTION_REGION),
        },
    )


def get_gae_descriptor(env: Mapping[str, str] | None = None) -> MonitoredResource:
    """Describe an App Engine app.

    ``GAE_SERVICE`` wins over the older ``GAE_MODULE_NAME`` when it is set
    and non-empty.
    """
    env = _environ(env)
    return MonitoredResource(
        type=ResourceType.GAE_APP,
        labels={
            LABEL_MODULE_ID: env.get(GCP_GAE_SERVICE) or env.get(GCP_GAE_MODULE_NAME),
            LABEL_VERSION_ID: env.get(GCP_GAE_VERSION),
        },
    )


async def get_gce_descriptor(metadata: MetadataProvider) -> MonitoredResource:
    """Describe a Compute Engine instance by its metadata ``id``."""
    response = await metadata.instance(METADATA_PATH_INSTANCE_ID)
    return MonitoredResource(
        type=ResourceType.GCE_INSTANCE,
        labels={LABEL_INSTANCE_ID: response.data},
    )


async def get_gke_descriptor(
    metadata: MetadataProvider,
    file_reader: FileReader,
    namespace_path: str = KUBERNETES_NAMESPACE_ID_PATH,
) -> MonitoredResource:
    """Describe a GKE container from the cluster name and the pod namespace.

    The namespace is only exposed through the service account mount, so the
    file is read after the cluster name has been fetched. A metadata failure
    propagates as-is and the file is never touched.
    """
    response = await metadata.instance(METADATA_PATH_CLUSTER_NAME)

    try:
        namespace = await file_reader.read_file(namespace_path, NAMESPACE_FILE_ENCODING)
    except Exception as e:
        raise NamespaceReadError(f"Error reading {namespace_path}: {e}", path=namespace_path) from e

    return MonitoredResource(
        type=ResourceType.CONTAINER,
        labels={
            LABEL_CLUSTER_NAME: response.data,
            LABEL_NAMESPACE_ID: namespace,
        },
    )


def get_global_descriptor() -> MonitoredResource:
    """Fallback descriptor when no specific environment applies."""
    return MonitoredResource(type=ResourceType.GLOBAL, labels={})
