"""Shared fixtures for the callspy test suite."""

from types import SimpleNamespace

import pytest

# Expose the plugin fixture even when the package isn't installed.
from callspy.pytest_plugin import spy_sandbox  # noqa: F401


@pytest.fixture
def target():
    """A plain object carrying two instance-level methods."""

    return SimpleNamespace(
        method1=lambda: "hi",
        method2=lambda: "bye",
    )
