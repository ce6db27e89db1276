"""Render recorded calls as rich tables for quick inspection while debugging."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from callspy.spy import Spy
from callspy.types import Call


def _format_args(call: Call) -> Text:
    return Text(", ".join(repr(arg) for arg in call.args))


def _format_kwargs(call: Call) -> Text:
    return Text(", ".join(f"{key}={value!r}" for key, value in call.kwargs.items()))


def render_calls(spy: Spy) -> Panel:
    """Build a rich Panel listing every call recorded by ``spy``.

    Values are shown with ``repr`` and wrapped in ``Text`` so brackets in
    reprs are never read as console markup.
    """

    table = Table("#", "Receiver", "Args", "Kwargs", expand=True)
    for call in spy.calls:
        receiver = Text("") if call.receiver is None else Text(repr(call.receiver))
        table.add_row(str(call.index), receiver, _format_args(call), _format_kwargs(call))

    if not spy.called:
        table.add_row("-", "", Text("No calls recorded"), "")

    return Panel(table, title=Text(spy.name), subtitle=f"{spy.call_count} call(s)")


def render_summary(spies: Iterable[Spy]) -> Table:
    """Build a one-row-per-spy overview, e.g. for everything in a sandbox."""

    table = Table("Spy", "Called", "Calls", expand=True)
    for spy in spies:
        table.add_row(Text(spy.name), "yes" if spy.called else "no", str(spy.call_count))
    return table


def print_calls(spy: Spy, console: Console | None = None) -> None:
    """Render and print the call history of ``spy`` to the provided console."""

    output_console = console or Console(force_terminal=False)
    output_console.print(render_calls(spy))
