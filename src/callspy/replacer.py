"""Spies installed in place of an attribute on an existing object."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from callspy.logging_utils import DEFAULT_LOGGER, LoggingManager
from callspy.slots import AttributeSlot
from callspy.spy import Spy


def _display_name(target: Any, name: str) -> str:
    owner = target.__name__ if hasattr(target, "__name__") else type(target).__name__
    return f"{owner}.{name}"


class MethodReplacer(Spy):
    """A spy swapped onto ``target.<name>`` that knows how to swap back.

    The current attribute value is captured when the replacer is created and
    the spy is installed immediately. :meth:`restore` writes the captured
    value back without checking what is there now, so anything assigned to
    the attribute in the meantime is overwritten.
    """

    def __init__(
        self,
        target: Any,
        name: str,
        delegate: Callable[..., Any] | None = None,
        *,
        logger: LoggingManager = DEFAULT_LOGGER,
    ) -> None:
        super().__init__(delegate, name=_display_name(target, name))
        self.logger = logger
        self.slot = AttributeSlot(target, name)
        self._install()

    def _install(self) -> None:
        installed: Any = self
        if inspect.isclass(self.target) and not self.slot.binds:
            # Anything that didn't bind before must not start binding now.
            installed = staticmethod(self)
        self.slot.set(installed)
        self.logger.debug(
            "Replaced %s (original %s)",
            self.name,
            "present" if self.slot.exists else "absent",
        )

    @property
    def target(self) -> Any:
        return self.slot.target

    @property
    def attribute(self) -> str:
        return self.slot.name

    @property
    def original(self) -> Any:
        """The attribute value at replacement time, or ``UNSET`` if it had none."""
        return self.slot.resolved

    def restore(self) -> None:
        """Put the original attribute value back on the target."""
        self.slot.restore()
        self.logger.debug("Restored %s", self.name)

    def passthrough(self) -> MethodReplacer:
        """Record calls and forward them to the original implementation."""
        self.set_delegate(self.original if callable(self.original) else None)
        return self

    def __enter__(self) -> MethodReplacer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()


def spy_on(
    target: Any,
    name: str,
    delegate: Callable[..., Any] | None = None,
) -> MethodReplacer:
    """Replace ``target.<name>`` with a spy and return it."""
    return MethodReplacer(target, name, delegate)
