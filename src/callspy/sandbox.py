"""Group spies so they can be reset or restored together."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from callspy.logging_utils import DEFAULT_LOGGER, LoggingManager
from callspy.replacer import MethodReplacer
from callspy.spy import Spy


class _SpyFactory:
    """``sandbox.spy(...)`` and ``sandbox.spy.on(...)``."""

    def __init__(self, sandbox: Sandbox) -> None:
        self._sandbox = sandbox

    def __call__(
        self,
        delegate: Callable[..., Any] | None = None,
        *,
        name: str | None = None,
    ) -> Spy:
        return self._sandbox._track(Spy(delegate, name=name))

    def on(
        self,
        target: Any,
        name: str,
        delegate: Callable[..., Any] | None = None,
    ) -> MethodReplacer:
        return self._sandbox._track(
            MethodReplacer(target, name, delegate, logger=self._sandbox.logger)
        )


class Sandbox:
    """Tracks the spies created through it.

    ``spies`` keeps insertion order and may hold duplicates. Treat it as
    read-only; it changes through :meth:`restore` (which drops the replacers
    it restored) and :meth:`flush` (which drops everything, restoring
    nothing).
    """

    def __init__(self, *, logger: LoggingManager = DEFAULT_LOGGER) -> None:
        self.logger = logger
        self.spies: list[Spy] = []
        self.spy = _SpyFactory(self)

    def _track(self, spy: Any) -> Any:
        self.spies.append(spy)
        return spy

    def spy_on(
        self,
        target: Any,
        name: str,
        delegate: Callable[..., Any] | None = None,
    ) -> MethodReplacer:
        """Replace ``target.<name>`` with a tracked spy."""
        return self.spy.on(target, name, delegate)

    def reset(self) -> None:
        """Clear the recorded calls of every tracked spy."""
        self.logger.debug("Resetting %d spies", len(self.spies))
        for spy in self.spies:
            spy.reset()

    def restore(self) -> None:
        """Restore replaced attributes, most recent replacement first.

        Restored replacers are removed from :attr:`spies`; plain spies stay.
        """
        restored = 0
        for index in range(len(self.spies) - 1, -1, -1):
            restore = getattr(self.spies[index], "restore", None)
            if not callable(restore):
                continue
            restore()
            del self.spies[index]
            restored += 1
        self.logger.debug("Restored %d replaced attributes", restored)

    def flush(self) -> None:
        """Forget every tracked spy without restoring anything."""
        self.spies.clear()

    def __len__(self) -> int:
        return len(self.spies)

    def __iter__(self) -> Iterator[Spy]:
        return iter(list(self.spies))

    def __enter__(self) -> Sandbox:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.restore()
        finally:
            self.flush()


def sandbox() -> Sandbox:
    """Create an empty sandbox."""
    return Sandbox()
