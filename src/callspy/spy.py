"""Recording call wrappers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from callspy.types import UNSET, Call


class Spy:
    """Callable that records each invocation and optionally delegates it.

    A delegate, when set, supplies the return value for every call and takes
    precedence over a fixed value configured with :meth:`returns`. Calls are
    recorded before the delegate runs, so an exception raised by the delegate
    propagates to the caller with the call already on record.

    Stored as a class attribute, a spy binds like a function: looking it up on
    an instance yields a :class:`BoundSpy` that records the instance as the
    call's receiver and passes it to the delegate as the first argument.
    """

    def __init__(
        self,
        delegate: Callable[..., Any] | None = None,
        *,
        name: str | None = None,
    ) -> None:
        self.name = name or "spy"
        self._calls: list[Call] = []
        self._delegate: Callable[..., Any] | None = None
        self._return_value: Any = UNSET
        self.set_delegate(delegate)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._invoke(None, args, kwargs)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return BoundSpy(self, instance)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} calls={self.call_count}>"

    def _invoke(self, receiver: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        self._calls.append(
            Call(index=len(self._calls), args=args, kwargs=kwargs, receiver=receiver)
        )

        delegate = self._delegate
        if delegate is not None:
            if receiver is not None:
                return delegate(receiver, *args, **kwargs)
            return delegate(*args, **kwargs)

        if self._return_value is UNSET:
            return None
        return self._return_value

    @property
    def called(self) -> bool:
        return len(self._calls) > 0

    @property
    def call_count(self) -> int:
        return len(self._calls)

    @property
    def calls(self) -> tuple[Call, ...]:
        """Snapshot of the recorded calls, oldest first."""
        return tuple(self._calls)

    @property
    def delegate(self) -> Callable[..., Any] | None:
        return self._delegate

    def get_call(self, index: int) -> Call | None:
        """Return the call recorded at ``index``, or ``None`` if there is none."""
        if 0 <= index < len(self._calls):
            return self._calls[index]
        return None

    def reset(self) -> None:
        """Forget recorded calls; the delegate and return value are kept."""
        self._calls.clear()

    def set_delegate(self, fn: Callable[..., Any] | None) -> Spy:
        """Replace the delegate. Passing ``None`` or any falsy value clears it."""
        if not fn:
            fn = None
        elif not callable(fn):
            raise TypeError(f"spy delegate must be callable, got {type(fn).__name__}")
        self._delegate = fn
        return self

    call_with = set_delegate

    def returns(self, value: Any) -> Spy:
        """Set the value returned when no delegate is configured."""
        self._return_value = value
        return self


class BoundSpy:
    """A spy bound to the instance it was looked up on."""

    __slots__ = ("__spy__", "__self__")

    def __init__(self, spy: Spy, receiver: Any) -> None:
        self.__spy__ = spy
        self.__self__ = receiver

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.__spy__._invoke(self.__self__, args, kwargs)

    def __getattr__(self, name: str) -> Any:
        return getattr(self.__spy__, name)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundSpy):
            return self.__spy__ is other.__spy__ and self.__self__ is other.__self__
        return NotImplemented

    def __hash__(self) -> int:
        return hash((id(self.__spy__), id(self.__self__)))

    def __repr__(self) -> str:
        return f"<bound {self.__spy__!r} of {self.__self__!r}>"
