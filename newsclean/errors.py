"""Domain exceptions for command and workflow diagnostics."""

from __future__ import annotations


class CommandStageError(RuntimeError):
    """Raised when a specific command stage fails."""

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


class ArticleIntakeError(ValueError):
    """Raised when a new article payload lacks required fields."""

    def __init__(self, missing_fields: tuple[str, ...]) -> None:
        """Initialize with the names of the missing fields."""

        super().__init__(f"Missing required fields: {', '.join(missing_fields)}.")
        self.missing_fields = missing_fields
