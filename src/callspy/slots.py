"""Read/write access to a single named attribute on an object."""

from __future__ import annotations

import inspect
import types
from typing import Any

from callspy.types import UNSET


class AttributeSlot:
    """A named attribute cell on ``target``, captured at construction time.

    ``raw`` is the value held in the target's own namespace (``UNSET`` when
    the attribute is inherited or missing) and is what :meth:`restore` puts
    back. ``resolved`` is what ordinary attribute lookup returned, which is
    the thing to call when forwarding to the original.
    """

    def __init__(self, target: Any, name: str) -> None:
        self.target = target
        self.name = name
        self.raw = self._own_value(target, name)
        self.resolved = getattr(target, name, UNSET)

    @staticmethod
    def _own_value(target: Any, name: str) -> Any:
        try:
            namespace = vars(target)
        except TypeError:
            # No __dict__ (slots, builtins); fall back to plain lookup.
            return getattr(target, name, UNSET)
        return namespace.get(name, UNSET)

    @property
    def exists(self) -> bool:
        return self.resolved is not UNSET

    @property
    def binds(self) -> bool:
        """True when a spy stored here would be bound to instances on lookup.

        Only class attributes that are plain functions (looked up through the
        MRO, without triggering descriptors) bind; static and class methods,
        partials, builtins and callable instances never do.
        """
        if not inspect.isclass(self.target):
            return False
        static = inspect.getattr_static(self.target, self.name, UNSET)
        return isinstance(static, types.FunctionType)

    def set(self, value: Any) -> None:
        setattr(self.target, self.name, value)

    def restore(self) -> None:
        """Put the captured value back, removing the attribute if it had none."""
        if self.raw is UNSET:
            if self._own_value(self.target, self.name) is not UNSET:
                delattr(self.target, self.name)
            return
        setattr(self.target, self.name, self.raw)

    def __repr__(self) -> str:
        return f"AttributeSlot({self.target!r}, {self.name!r})"
