"""Record-cleaning workflow used by the CLI.

Responsibilities:
- Run load, order, clean and write stages for one article document.
- Emit stage telemetry and convert stage failures into `CommandStageError`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from .config import NewscleanConfig
from .errors import CommandStageError
from .io.article_files import ArticlePayload, ArticleFileStore, sort_newest_first
from .records import clean_record
from .telemetry.logger import RunLogger

_StageResult = TypeVar("_StageResult")


@dataclass(frozen=True, slots=True)
class CleanResult:
    """Outcome of one cleaning run.

    Attributes:
        record_count: Number of article records cleaned.
        output_path: Written document path, or `None` when nothing was written.
        payload: Cleaned article or list of articles.
    """

    record_count: int
    output_path: Path | None
    payload: ArticlePayload


class CleanWorkflow:
    """Load an article document, clean its text fields and write the result."""

    def __init__(self, run_logger: RunLogger | None = None) -> None:
        """Initialize the workflow with an optional structured logger."""

        self._run_logger = run_logger

    def run(self, config: NewscleanConfig) -> CleanResult:
        """Execute every stage for the configured document."""

        store = ArticleFileStore(Path("."), indent=config.indent)
        payload = self._run_stage("load", lambda: self._load(store, config))
        if config.newest_first and isinstance(payload, list):
            payload = self._run_stage("order", lambda: sort_newest_first(payload))
        cleaned = self._run_stage(
            "clean",
            lambda: self._clean(payload, config),
            counters=lambda result: {"records": _record_count(result)},
        )
        record_count = _record_count(cleaned)

        output_path = config.output_path
        if output_path is not None:
            output_path = self._run_stage(
                "write", lambda: self._write(store, config.output_path, cleaned)
            )
        return CleanResult(record_count=record_count, output_path=output_path, payload=cleaned)

    def _load(self, store: ArticleFileStore, config: NewscleanConfig) -> ArticlePayload:
        """Read the input document."""

        try:
            return store.load(config.input_path)
        except FileNotFoundError as exc:
            raise CommandStageError(
                stage="load",
                detail=f"Article file not found: `{config.input_path}`.",
                hint="Pass an existing JSON file as input.",
            ) from exc
        except ValueError as exc:
            raise CommandStageError(
                stage="load",
                detail=str(exc),
                hint="Provide a JSON object or a JSON list of objects.",
            ) from exc

    def _clean(self, payload: ArticlePayload, config: NewscleanConfig) -> ArticlePayload:
        """Apply text cleaning to the configured fields."""

        try:
            return clean_record(payload, config.fields)
        except Exception as exc:
            raise CommandStageError(
                stage="clean",
                detail=f"Failed to clean article text: {exc}",
                hint="Check that the cleaned fields hold strings or null.",
            ) from exc

    def _write(
        self, store: ArticleFileStore, output_path: Path, payload: ArticlePayload
    ) -> Path:
        """Write the cleaned document."""

        try:
            return store.save(output_path, payload)
        except OSError as exc:
            raise CommandStageError(
                stage="write",
                detail=f"Failed to write `{output_path}`: {exc}",
                hint="Verify the output directory is writable.",
            ) from exc

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
        counters: Callable[[_StageResult], dict[str, object]] | None = None,
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events.

        `counters`, when given, maps the stage result to fields logged with the
        complete event.
        """

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        if self._run_logger is not None:
            context = counters(result) if counters is not None else {}
            self._run_logger.log_stage_complete(stage_name, **context)
        return result


def _record_count(payload: ArticlePayload) -> int:
    """Return how many article records a payload holds."""

    return len(payload) if isinstance(payload, list) else 1
