#!/usr/bin/env python3
"""
Monitored resource constants: environment variables, metadata paths and label keys.
"""

# ---------------------------------------------------------------------------
# Environment signal tokens
# ---------------------------------------------------------------------------
ENV_APP_ENGINE = "APP_ENGINE"
ENV_CLOUD_FUNCTIONS = "CLOUD_FUNCTIONS"
ENV_COMPUTE_ENGINE = "COMPUTE_ENGINE"
ENV_KUBERNETES_ENGINE = "KUBERNETES_ENGINE"
ENV_NONE = "NONE"


# ---------------------------------------------------------------------------
# Monitored resource types
# ---------------------------------------------------------------------------
RESOURCE_GCE_INSTANCE = "gce_instance"
RESOURCE_CONTAINER = "container"
RESOURCE_GAE_APP = "gae_app"
RESOURCE_CLOUD_FUNCTION = "cloud_function"
RESOURCE_GLOBAL = "global"


# ---------------------------------------------------------------------------
# Label keys
# ---------------------------------------------------------------------------
LABEL_INSTANCE_ID = "instance_id"
LABEL_CLUSTER_NAME = "cluster_name"
LABEL_NAMESPACE_ID = "namespace_id"
LABEL_MODULE_ID = "module_id"
LABEL_VERSION_ID = "version_id"
LABEL_FUNCTION_NAME = "function_name"
LABEL_REGION = "region"


# ---------------------------------------------------------------------------
# Cloud Functions environment variables
# ---------------------------------------------------------------------------
GCP_FUNCTION_NAME = "FUNCTION_NAME"
GCP_FUNCTION_REGION = "FUNCTION_REGION"
GCP_FUNCTION_TARGET = "FUNCTION_TARGET"


# ---------------------------------------------------------------------------
# App Engine environment variables
# ---------------------------------------------------------------------------
GCP_GAE_MODULE_NAME = "GAE_MODULE_NAME"  # pre-"service" runtimes
GCP_GAE_SERVICE = "GAE_SERVICE"
GCP_GAE_VERSION = "GAE_VERSION"


# ---------------------------------------------------------------------------
# Metadata server
# ---------------------------------------------------------------------------
ENV_METADATA_HOST = "GCE_METADATA_HOST"
ENV_METADATA_TIMEOUT = "GCE_METADATA_TIMEOUT"

DEFAULT_METADATA_HOST = "metadata.google.internal"
DEFAULT_METADATA_TIMEOUT = 3.0
METADATA_BASE_PATH = "/computeMetadata/v1"
METADATA_INSTANCE_PATH = "instance"
METADATA_FLAVOR_HEADER = "Metadata-Flavor"
METADATA_FLAVOR_VALUE = "Google"

METADATA_PATH_INSTANCE_ID = "id"
METADATA_PATH_CLUSTER_NAME = "attributes/cluster-name"


# ---------------------------------------------------------------------------
# Kubernetes namespace file
# ---------------------------------------------------------------------------
ENV_NAMESPACE_FILE = "KUBERNETES_NAMESPACE_FILE"
KUBERNETES_NAMESPACE_ID_PATH = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"
NAMESPACE_FILE_ENCODING = "utf-8"


# ---------------------------------------------------------------------------
# Label keys required per resource type
# ---------------------------------------------------------------------------
RESOURCE_LABEL_KEYS = {
    RESOURCE_GCE_INSTANCE: frozenset({LABEL_INSTANCE_ID}),
    RESOURCE_CONTAINER: frozenset({LABEL_CLUSTER_NAME, LABEL_NAMESPACE_ID}),
    RESOURCE_GAE_APP: frozenset({LABEL_MODULE_ID, LABEL_VERSION_ID}),
    RESOURCE_CLOUD_FUNCTION: frozenset({LABEL_FUNCTION_NAME, LABEL_REGION}),
    RESOURCE_GLOBAL: frozenset(),
}
