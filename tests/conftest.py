#!/usr/bin/env python3
"""Shared fakes for the metadata server, the filesystem and the environment signal."""

import pytest

from gcp_monitored_resource.base import EnvironmentSignal, FileReader, MetadataProvider
from gcp_monitored_resource.types import MetadataResponse

FAKE_READFILE_ERROR_MESSAGE = "fake readFile error"
FAKE_READFILE_CONTENTS = "fake readFile contents"


class FakeMetadata(MetadataProvider):
    """Records requested paths and answers with ``data`` or raises ``error``."""

    def __init__(self, data: str = "fake-instance-value", error: Exception | None = None):
        self.data = data
        self.error = error
        self.paths: list[str] = []

    async def instance(self, path: str) -> MetadataResponse:
        self.paths.append(path)
        if self.error is not None:
            raise self.error
        return MetadataResponse(data=self.data)

    async def is_available(self) -> bool:
        return self.error is None


class FakeFileReader(FileReader):
    def __init__(self, contents: str = FAKE_READFILE_CONTENTS, should_error: bool = False):
        self.contents = contents
        self.should_error = should_error
        self.reads: list[tuple[str, str]] = []

    async def read_file(self, path: str, encoding: str = "utf-8") -> str:
        self.reads.append((path, encoding))
        if self.should_error:
            raise OSError(FAKE_READFILE_ERROR_MESSAGE)
        return self.contents


class FakeSignal(EnvironmentSignal):
    def __init__(self, environment: str = "NONE", error: Exception | None = None):
        self.environment = environment
        self.error = error
        self.calls = 0

    async def get_env(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.environment


@pytest.fixture
def make_metadata():
    """Factory for FakeMetadata instances."""
    return FakeMetadata


@pytest.fixture
def make_file_reader():
    """Factory for FakeFileReader instances."""
    return FakeFileReader


@pytest.fixture
def make_signal():
    """Factory for FakeSignal instances."""
    return FakeSignal


@pytest.fixture
def readfile_contents():
    return FAKE_READFILE_CONTENTS


@pytest.fixture
def readfile_error_message():
    return FAKE_READFILE_ERROR_MESSAGE
