"""Structured, serialisable description of a diagnostic."""

from __future__ import annotations

import traceback

from pydantic import BaseModel

from .errors import AggregateError, ErrorKind, classify_error

# Pre-allocated empty tuple for leaf reports
_NO_CAUSES: tuple[ErrorReport, ...] = ()


class ErrorReport(BaseModel):
    """Snapshot of a diagnostic, nested for aggregates.

    Built from live exceptions but holds only plain data, so it can be logged,
    rendered or dumped to JSON without keeping the exception alive.

    Example:
        >>> report = ErrorReport.from_error(ValueError("bad input"))
        >>> report.kind, report.type, report.message
        (<ErrorKind.INVALID: 'INVALID'>, 'ValueError', 'bad input')
    """

    model_config = {"frozen": True}

    kind: ErrorKind
    type: str | None = None
    message: str = ""
    causes: tuple[ErrorReport, ...] = _NO_CAUSES
    details: str | None = None

    @classmethod
    def from_error(cls, error: BaseException | None, *, include_traceback: bool | None = None) -> ErrorReport:
        """Describe ``error``; ``None`` yields an ABSENT report.

        ``include_traceback`` defaults to the ``report.include_traceback`` setting.
        """
        if include_traceback is None:
            from ..foundation.config import runtime_settings
            include_traceback = runtime_settings().report.include_traceback
        if error is None:
            return cls(kind=ErrorKind.ABSENT, message="unknown failure")
        causes = _NO_CAUSES
        if isinstance(error, AggregateError):
            causes = tuple(cls.from_error(e, include_traceback=include_traceback) for e in error.errors)
        details = None
        if include_traceback and error.__traceback__ is not None:
            details = "".join(traceback.format_exception(error))
        return cls(
            kind=classify_error(error),
            type=type(error).__name__,
            message=str(error),
            causes=causes,
            details=details,
        )

    def render(self, indent: int = 0) -> str:
        """Format as indented human-readable text."""
        pad = "  " * indent
        head = f"{pad}[{self.kind}] {self.type}: {self.message}" if self.type else f"{pad}[{self.kind}] {self.message}"
        lines = [head]
        if self.details:
            lines.extend(f"{pad}  | {line}" for line in self.details.rstrip().splitlines())
        lines.extend(cause.render(indent + 1) for cause in self.causes)
        return "\n".join(lines)

    __str__ = render
