# tests/unit/conftest.py
"""Pytest configuration and shared fixtures for gh-label-state unit tests."""

# Re-export all fixtures to make them available to tests
from .fixtures.config import *
from .fixtures.github import *
from .fixtures.cli import *
from .fixtures.store import *
