"""Domain exceptions for comment normalization and CLI diagnostics."""

from __future__ import annotations


class InvalidCommentFormat(ValueError):
    """Raised when a raw comment lacks its opening or closing delimiter."""

    def __init__(self, reason: str, raw: str = "") -> None:
        """Initialize with a short reason and the rejected raw text."""

        super().__init__(f"Invalid documentation comment: {reason}.")
        self.reason = reason
        self.raw = raw


class NullAddressError(ValueError):
    """Raised when a native-linking API receives the null address sentinel."""

    def __init__(self, operation: str, detail: str) -> None:
        super().__init__(f"{operation}: {detail}")
        self.operation = operation
        self.detail = detail


class GoldenCaseError(ValueError):
    """Raised when a golden-case file is malformed or contains no cases."""


class CommandStageError(RuntimeError):
    """Raised when a specific CLI command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
