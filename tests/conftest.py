"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from medley.config import MedleyConfig


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config() -> MedleyConfig:
    """Default library configuration."""
    return MedleyConfig()


class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def mcp() -> MockMCPServer:
    """Tool-collecting stand-in for ChukMCPServer."""
    return MockMCPServer("test")
