"""Record-and-delegate spies for tests.

``spy()`` builds a standalone spy, ``spy.on()`` swaps one onto an object's
attribute, and ``spy.sandbox()`` groups spies for bulk reset and restore.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from callspy.logging_utils import setup_logging
from callspy.render import print_calls, render_calls
from callspy.replacer import MethodReplacer, spy_on
from callspy.sandbox import Sandbox, sandbox
from callspy.spy import BoundSpy, Spy
from callspy.types import UNSET, Call


def spy(delegate: Callable[..., Any] | None = None, *, name: str | None = None) -> Spy:
    """Create a spy, optionally forwarding every call to ``delegate``."""
    return Spy(delegate, name=name)


spy.on = spy_on  # type: ignore[attr-defined]
spy.sandbox = sandbox  # type: ignore[attr-defined]

__all__ = [
    "UNSET",
    "BoundSpy",
    "Call",
    "MethodReplacer",
    "Sandbox",
    "Spy",
    "print_calls",
    "render_calls",
    "sandbox",
    "setup_logging",
    "spy",
    "spy_on",
]
