"""Shared records and sentinels for spies."""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping
from typing import Any


class _Unset:
    """Marker for "nothing configured" where ``None`` is a legitimate value."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclasses.dataclass(frozen=True)
class Call:
    """A single recorded invocation of a spy."""

    index: int
    args: tuple[Any, ...]
    kwargs: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    receiver: Any = None

    def __post_init__(self) -> None:
        # Freeze the keyword mapping so a Call can't drift after recording.
        object.__setattr__(self, "kwargs", types.MappingProxyType(dict(self.kwargs)))
