"""Exception classes for tuimark.

Provides standardized exceptions for error handling throughout tuimark.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class TuimarkError(Exception):
    """Base exception for all tuimark errors.

    Subclass this for specific error categories.
    """

    pass


class ScopeKind(Enum):
    """The kind of writer scope an event tried to close."""

    INLINE_STYLE = "inline style"
    LINE_STYLE = "line style"
    LINE_PREFIX = "line prefix"
    LIST = "list"
    LINK = "link"


class NestingError(TuimarkError):
    """Error when an event closes a scope that was never opened.

    Event sources are expected to be well nested; this signals a contract
    violation by the caller or the parser rather than a rendering problem.
    """

    def __init__(self, kind: ScopeKind, event: Any = None) -> None:
        """Initialize nesting error.

        Args:
            kind: The scope stack that would have underflowed
            event: The offending event (optional)
        """
        self.kind = kind
        self.event = event

        subject = f"{event!r}" if event is not None else "event"
        super().__init__(f"{subject} closes a {kind.value} scope that was never opened")


class StyleSheetError(TuimarkError):
    """Error in a theme definition.

    Raised when a theme entry cannot be turned into a style.
    """

    def __init__(self, key: str, message: str) -> None:
        """Initialize style sheet error.

        Args:
            key: Theme key (e.g., "heading1", "code")
            message: Description of the problem
        """
        self.key = key
        super().__init__(f"Theme entry '{key}': {message}")


class RenderError(TuimarkError):
    """Error while painting styled text to a terminal.

    Raised when the output surface rejects the rendered lines.
    """

    pass
