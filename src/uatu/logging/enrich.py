"""
Error and stack-trace enrichment for error-level messages.
"""

from __future__ import annotations

import traceback
from traceback import FrameSummary
from typing import List, Optional, Protocol, Sequence, runtime_checkable

STACK_BANNER = "Stack Trace " + "-" * 89 + "\n"
STACK_FOOTER = "-" * 101


@runtime_checkable
class StackTracer(Protocol):
    """Errors that can report the call stack they were created on."""

    def stack_trace(self) -> Sequence[FrameSummary]: ...


def error_frames(err: BaseException) -> Optional[List[FrameSummary]]:
    """Frames carried by ``err``, or ``None`` if it exposes no stack."""
    if isinstance(err, StackTracer):
        return list(err.stack_trace())
    if err.__traceback__ is not None:
        return list(traceback.extract_tb(err.__traceback__))
    return None


def format_frame(frame: FrameSummary) -> str:
    return f"{frame.name}\n\t{frame.filename}:{frame.lineno}\n"


def capture_stack(skip: int = 1) -> str:
    """Format the current call stack, dropping the ``skip`` innermost frames."""
    frames = traceback.extract_stack()
    if skip > 0:
        frames = frames[:-skip]
    return "".join(traceback.format_list(frames))


def enrich(err: Optional[BaseException], msg: str) -> str:
    """Fold ``err`` and a stack trace into ``msg``.

    Without an error the text is returned untouched. Errors exposing frames
    get them under a banner; otherwise the caller's current stack is
    appended as-is.
    """
    if err is None:
        return msg

    if msg == "":
        msg = f"Error: {err}\n"
    else:
        msg = f"{msg}\nError: {err}\n"

    frames = error_frames(err)
    if frames is not None:
        msg += STACK_BANNER
        msg += "".join(format_frame(frame) for frame in frames)
        msg += STACK_FOOTER
    else:
        # drop capture_stack and enrich themselves
        msg += capture_stack(skip=2)

    return msg
