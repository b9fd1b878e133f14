"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from s2coding.codec.stream import ByteWriter


class FailingSink:
    """Byte sink whose transport breaks after ``limit`` bytes."""

    def __init__(self, limit: int = 0) -> None:
        self.limit = limit
        self.written: list[int] = []

    def write_byte(self, value: int) -> None:
        if len(self.written) >= self.limit:
            raise OSError("sink closed")
        self.written.append(value)


class FailingSource:
    """Byte source whose transport fails on every read."""

    def read_byte(self) -> int:
        raise OSError("connection reset")


@pytest.fixture
def writer() -> ByteWriter:
    """Empty in-memory byte writer."""
    return ByteWriter()


@pytest.fixture
def failing_sink() -> FailingSink:
    """Sink that fails on the first write."""
    return FailingSink()


@pytest.fixture
def failing_source() -> FailingSource:
    """Source that fails on the first read."""
    return FailingSource()
