#!/usr/bin/env python3
# src/gcp_monitored_resource/types.py
"""
Types - monitored resource descriptor and environment enumerations
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

import orjson
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import (
    ENV_APP_ENGINE,
    ENV_CLOUD_FUNCTIONS,
    ENV_COMPUTE_ENGINE,
    ENV_KUBERNETES_ENGINE,
    ENV_NONE,
    RESOURCE_CLOUD_FUNCTION,
    RESOURCE_CONTAINER,
    RESOURCE_GAE_APP,
    RESOURCE_GCE_INSTANCE,
    RESOURCE_GLOBAL,
    RESOURCE_LABEL_KEYS,
)


class ResourceType(str, Enum):
    """Monitored resource type tags."""

    GCE_INSTANCE = RESOURCE_GCE_INSTANCE
    CONTAINER = RESOURCE_CONTAINER
    GAE_APP = RESOURCE_GAE_APP
    CLOUD_FUNCTION = RESOURCE_CLOUD_FUNCTION
    GLOBAL = RESOURCE_GLOBAL


class GCPEnvironment(str, Enum):
    """Environment signal tokens reported by an EnvironmentSignal."""

    APP_ENGINE = ENV_APP_ENGINE
    CLOUD_FUNCTIONS = ENV_CLOUD_FUNCTIONS
    COMPUTE_ENGINE = ENV_COMPUTE_ENGINE
    KUBERNETES_ENGINE = ENV_KUBERNETES_ENGINE
    NONE = ENV_NONE


class MonitoredResource(BaseModel):
    """A ``{type, labels}`` descriptor identifying the runtime environment.

    Label values are passed through verbatim, so an unset environment
    variable shows up as ``None`` rather than a missing key. Labels are
    stored read-only and must carry exactly the keys of their type.
    """

    model_config = ConfigDict(frozen=True)

    type: ResourceType
    labels: Mapping[str, str | None] = Field(default_factory=dict, validate_default=True)

    @field_validator("labels", mode="after")
    @classmethod
    def _freeze_labels(cls, labels: Mapping[str, str | None]) -> Mapping[str, str | None]:
        return MappingProxyType(dict(labels))

    @model_validator(mode="after")
    def _check_label_keys(self) -> "MonitoredResource":
        expected = RESOURCE_LABEL_KEYS[self.type.value]
        actual = set(self.labels)
        if actual != expected:
            raise ValueError(
                f"{self.type.value} labels must be {sorted(expected)}, got {sorted(actual)}"
            )
        return self

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form suitable for attaching to a log entry."""
        return {"type": self.type.value, "labels": dict(self.labels)}

    def to_json(self, indent: bool = False) -> bytes:
        option = orjson.OPT_INDENT_2 if indent else 0
        result: bytes = orjson.dumps(self.to_dict(), option=option)
        return result


class MetadataResponse(BaseModel):
    """Body of a metadata server reply."""

    model_config = ConfigDict(frozen=True)

    data: str
