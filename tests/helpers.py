"""Reusable test utilities and recording stubs for the test suite."""

import functools


class RecordingLogger:
    """In-memory logger capturing formatted log messages and setup calls."""

    def __init__(self):
        self.messages: list[str] = []
        self.setup_calls: list[bool] = []

    def setup(self, verbose: bool, log_file=None) -> None:
        self.setup_calls.append(verbose)

    def log(self, msg: str, *args) -> None:
        self.messages.append(msg % args if args else msg)

    def debug(self, msg: str, *args) -> None:
        self.messages.append(f"DEBUG:{msg % args if args else msg}")


class Greeter:
    """Small class with one method of each binding kind."""

    prefix = "hello"

    def greet(self, name):
        return f"{self.prefix} {name}"

    @staticmethod
    def shout(text):
        return text.upper()

    @classmethod
    def kind(cls):
        return cls.__name__


class PoliteGreeter(Greeter):
    """Subclass that inherits every method from Greeter unchanged."""

    prefix = "good day"


def _add(left, right):
    return left + right


class Adder:
    """Class whose callable attributes never bind to instances."""

    plus_one = functools.partial(_add, 1)
    absolute = abs
