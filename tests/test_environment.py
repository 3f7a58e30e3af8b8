#!/usr/bin/env python3
"""Tests for GCPEnvironmentDetector."""

from unittest.mock import AsyncMock, Mock

import pytest

from gcp_monitored_resource.environment import GCPEnvironmentDetector
from gcp_monitored_resource.errors import MetadataServerError
from gcp_monitored_resource.types import MetadataResponse


def mock_metadata(available=True, cluster_name=None):
    metadata = Mock()
    metadata.is_available = AsyncMock(return_value=available)
    if cluster_name is None:
        metadata.instance = AsyncMock(
            side_effect=MetadataServerError("not found", path="attributes/cluster-name", status_code=404)
        )
    else:
        metadata.instance = AsyncMock(return_value=MetadataResponse(data=cluster_name))
    return metadata


class TestGCPEnvironmentDetector:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "env",
        [
            {"GAE_SERVICE": "default"},
            {"GAE_MODULE_NAME": "default"},
            {"GAE_SERVICE": "default", "FUNCTION_NAME": "fn"},
        ],
    )
    async def test_app_engine(self, env):
        metadata = mock_metadata()
        detector = GCPEnvironmentDetector(metadata, env=env)

        assert await detector.get_env() == "APP_ENGINE"
        metadata.is_available.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("env", [{"FUNCTION_NAME": "fn"}, {"FUNCTION_TARGET": "handler"}])
    async def test_cloud_functions(self, env):
        detector = GCPEnvironmentDetector(mock_metadata(), env=env)
        assert await detector.get_env() == "CLOUD_FUNCTIONS"

    @pytest.mark.asyncio
    async def test_kubernetes_engine(self):
        metadata = mock_metadata(cluster_name="cluster-1")
        detector = GCPEnvironmentDetector(metadata, env={})

        assert await detector.get_env() == "KUBERNETES_ENGINE"
        metadata.instance.assert_awaited_once_with("attributes/cluster-name")

    @pytest.mark.asyncio
    async def test_compute_engine(self):
        detector = GCPEnvironmentDetector(mock_metadata(), env={})
        assert await detector.get_env() == "COMPUTE_ENGINE"

    @pytest.mark.asyncio
    async def test_none(self):
        metadata = mock_metadata(available=False)
        detector = GCPEnvironmentDetector(metadata, env={})

        assert await detector.get_env() == "NONE"
        metadata.instance.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_variables_are_ignored(self):
        detector = GCPEnvironmentDetector(mock_metadata(available=False), env={"GAE_SERVICE": "", "FUNCTION_NAME": ""})
        assert await detector.get_env() == "NONE"

    @pytest.mark.asyncio
    async def test_detection_is_not_cached(self):
        env = {}
        detector = GCPEnvironmentDetector(mock_metadata(available=False), env=env)

        assert await detector.get_env() == "NONE"
        env["FUNCTION_NAME"] = "fn"
        assert await detector.get_env() == "CLOUD_FUNCTIONS"

    @pytest.mark.asyncio
    async def test_accepts_any_metadata_provider(self, make_metadata):
        metadata = make_metadata(data="cluster-1")
        detector = GCPEnvironmentDetector(metadata, env={})

        assert await detector.get_env() == "KUBERNETES_ENGINE"
        assert metadata.paths == ["attributes/cluster-name"]

    @pytest.mark.asyncio
    async def test_unreachable_provider_means_none(self, make_metadata):
        detector = GCPEnvironmentDetector(make_metadata(error=RuntimeError("down")), env={})
        assert await detector.get_env() == "NONE"
