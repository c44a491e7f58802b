"""Shared pytest fixtures and configuration for the libext test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Host objects are plain test doubles, never real GUI bindings.
* Map iteration order is never asserted positionally.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest


@dataclass
class FakeElement:
    """Stand-in for a host element exposing ``class_name``."""

    class_name: str = ""


@dataclass
class FakeWindow:
    """Stand-in for a host window exposing its inner size."""

    inner_width: int = 1280
    inner_height: int = 720


@pytest.fixture
def element() -> FakeElement:
    return FakeElement(class_name="card active")


@pytest.fixture
def window() -> FakeWindow:
    return FakeWindow()
