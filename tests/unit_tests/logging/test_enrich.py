"""
Error enrichment unit tests.

Covers the three paths: no error, errors that carry frames (raised
exceptions and ``StackTracer`` implementations), and errors that do not
(current stack captured instead).
"""

from __future__ import annotations

from traceback import FrameSummary

from uatu.logging.enrich import STACK_BANNER, STACK_FOOTER, StackTracer, capture_stack, enrich, error_frames


class TracedError(Exception):
    """Error that reports its own frames."""

    def stack_trace(self):
        return [
            FrameSummary("service/handlers.py", 10, "handle_request", lookup_line=False),
            FrameSummary("service/main.py", 3, "main", lookup_line=False),
        ]


def _raise_and_catch() -> ValueError:
    try:
        raise ValueError("boom")
    except ValueError as exc:
        return exc


class TestEnrichWithoutError:
    def test_returns_message_unchanged(self) -> None:
        assert enrich(None, "plain text") == "plain text"

    def test_empty_message_stays_empty(self) -> None:
        assert enrich(None, "") == ""


class TestEnrichWithFrames:
    def test_stack_tracer_frames_are_bannered(self) -> None:
        result = enrich(TracedError("db down"), "")
        assert result == (
            "Error: db down\n"
            + STACK_BANNER
            + "handle_request\n\tservice/handlers.py:10\n"
            + "main\n\tservice/main.py:3\n"
            + STACK_FOOTER
        )

    def test_message_precedes_error_line(self) -> None:
        result = enrich(TracedError("db down"), "request failed")
        assert result.startswith("request failed\nError: db down\n" + STACK_BANNER)

    def test_raised_exception_uses_its_traceback(self) -> None:
        exc = _raise_and_catch()
        result = enrich(exc, "ctx")
        assert result.startswith("ctx\nError: boom\n" + STACK_BANNER)
        assert f"_raise_and_catch\n\t{__file__}:" in result
        assert result.endswith(STACK_FOOTER)

    def test_banner_and_footer_have_same_width(self) -> None:
        assert len(STACK_BANNER.rstrip("\n")) == len(STACK_FOOTER) == 101
        assert STACK_BANNER.startswith("Stack Trace -")

    def test_protocol_detection(self) -> None:
        assert isinstance(TracedError("x"), StackTracer)
        assert not isinstance(ValueError("x"), StackTracer)


class TestEnrichWithoutFrames:
    def test_unraised_error_gets_current_stack(self) -> None:
        result = enrich(ValueError("boom"), "")
        assert result.startswith("Error: boom\n")
        assert STACK_BANNER not in result
        assert "in test_unraised_error_gets_current_stack\n" in result

    def test_enricher_frames_are_skipped(self) -> None:
        result = enrich(RuntimeError("x"), "msg")
        assert ", in enrich\n" not in result
        assert ", in capture_stack\n" not in result

    def test_unraised_error_has_no_frames(self) -> None:
        assert error_frames(ValueError("x")) is None

    def test_capture_stack_skips_itself_by_default(self) -> None:
        stack = capture_stack()
        assert ", in capture_stack\n" not in stack
        assert "in test_capture_stack_skips_itself_by_default\n" in stack
