"""pytest integration: a per-test sandbox that cleans up after itself."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from callspy.sandbox import Sandbox


@pytest.fixture
def spy_sandbox() -> Iterator[Sandbox]:
    """Yield a sandbox whose replaced attributes are restored at teardown."""
    with Sandbox() as box:
        yield box
