"""Tests for logging utilities."""

import io
import logging

from callspy import logging_utils


def test_logging_manager_sets_level():
    """setup should configure the logger with the requested verbosity."""

    manager = logging_utils.LoggingManager("level_test")

    manager.setup(verbose=False)
    assert manager.logger.level == logging.INFO

    manager.setup(verbose=True)
    assert manager.logger.level == logging.DEBUG


def test_logging_manager_does_not_propagate():
    manager = logging_utils.LoggingManager("propagate_test")

    assert manager.logger.propagate is False


def test_logging_manager_formats_debug_arguments():
    """debug should accept formatting args like the stdlib logger."""

    manager = logging_utils.LoggingManager("arg_formatting")
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))

    manager.logger.handlers = [handler]
    manager.logger.setLevel(logging.DEBUG)

    manager.debug("spy=%s calls=%s", "fetch", 3)

    handler.flush()
    assert "spy=fetch calls=3" in stream.getvalue()


def test_setup_writes_to_log_file(tmp_path):
    log_file = tmp_path / "callspy.log"
    manager = logging_utils.LoggingManager("file_test")

    manager.setup(verbose=False, log_file=str(log_file))
    manager.log("hello %s", "file")
    for handler in manager.logger.handlers:
        handler.flush()

    assert "[INFO] hello file" in log_file.read_text(encoding="utf-8")
    for handler in manager.logger.handlers:
        handler.close()


def test_setup_survives_unwritable_log_file(tmp_path):
    manager = logging_utils.LoggingManager("bad_file_test")

    manager.setup(verbose=True, log_file=str(tmp_path / "missing" / "callspy.log"))

    assert len(manager.logger.handlers) == 1


def test_only_setup_wrapper_is_exposed():
    """The module keeps a single procedural entry point."""

    assert callable(logging_utils.setup_logging)
    assert not hasattr(logging_utils, "log")
    assert not hasattr(logging_utils, "debug")
