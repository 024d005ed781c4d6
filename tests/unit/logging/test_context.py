"""Unit tests for logging context module."""

import logging
import threading

from stringy.logging.context import (
    OperationContextFilter,
    get_operation_context,
    operation_context,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="test.py",
        lineno=1,
        msg="Test",
        args=(),
        exc_info=None,
    )


class TestOperationContext:
    """Tests for the operation_context context manager."""

    def test_default_context_is_none(self) -> None:
        """Outside any operation both values are None."""
        assert get_operation_context() == (None, None)

    def test_sets_values_on_entry(self) -> None:
        with operation_context("slugify", "UTF-8"):
            assert get_operation_context() == ("slugify", "UTF-8")

    def test_resets_on_exit(self) -> None:
        with operation_context("slugify"):
            pass
        assert get_operation_context() == (None, None)

    def test_resets_on_exception(self) -> None:
        """Context is restored even if the body raises."""
        try:
            with operation_context("repeat"):
                raise ValueError("boom")
        except ValueError:
            pass
        assert get_operation_context() == (None, None)

    def test_nested_contexts_restore_outer(self) -> None:
        with operation_context("outer", "UTF-8"):
            with operation_context("inner"):
                assert get_operation_context() == ("inner", None)
            assert get_operation_context() == ("outer", "UTF-8")

    def test_isolated_between_threads(self) -> None:
        """Each thread sees its own context."""
        seen: list[tuple] = []

        def worker() -> None:
            seen.append(get_operation_context())

        with operation_context("camelize"):
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()

        assert seen == [(None, None)]


class TestOperationContextFilter:
    """Tests for OperationContextFilter."""

    def test_injects_operation(self) -> None:
        record = _record()
        with operation_context("titleize", "ISO-8859-1"):
            assert OperationContextFilter().filter(record) is True

        assert record.operation == "titleize"
        assert record.encoding == "ISO-8859-1"
        assert record.operation_tag == "[titleize] "

    def test_empty_tag_outside_operation(self) -> None:
        """Records outside an operation get an empty tag."""
        record = _record()
        OperationContextFilter().filter(record)

        assert record.operation is None
        assert record.operation_tag == ""
