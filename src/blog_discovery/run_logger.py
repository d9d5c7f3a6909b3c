"""Run logger for recording filter pipeline evaluations to JSON files."""

import dataclasses
import uuid
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from blog_discovery.data import ArticleSummary, FilterState


class StageRecord(BaseModel):
    """Record of a single pipeline stage execution."""

    stage: str
    component: str
    input_count: int = 0
    output_count: int = 0
    detail: Any = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class RunRecord(BaseModel):
    """Record of one pipeline evaluation."""

    run_id: str
    state: dict[str, Any]
    total_count: int
    started_at: str
    completed_at: str | None = None
    stages: list[StageRecord] = []
    visible_count: int = 0
    visible_ids: list[str] = []


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, enums, datetimes, sequences, dicts
    and primitives.
    """
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, datetime):
        return obj.isoformat()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _serialize(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, list | tuple):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class RunLogger:
    """Accumulates pipeline stage records and writes a JSON log file per evaluation.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: RunRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, state: FilterState, total_count: int) -> None:
        """Initialize a new run record.

        Args:
            state: Filter state being evaluated.
            total_count: Size of the full article list.
        """
        if not self._enabled:
            return

        self._record = RunRecord(
            run_id=str(uuid.uuid4()),
            state=_serialize(state),
            total_count=total_count,
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_stage(
        self,
        stage: str,
        component: str,
        input_count: int,
        output_count: int,
        duration_seconds: float,
        detail: Any = None,
    ) -> None:
        """Append a stage record to the current run.

        Args:
            stage: Stage name (e.g. "search", "tag_filter", "sort").
            component: Component name.
            input_count: Number of articles entering the stage.
            output_count: Number of articles leaving the stage.
            duration_seconds: Wall-clock time for this stage.
            detail: Stage parameters (query, tag, sort), serialized.
        """
        if not self._enabled or self._record is None:
            return

        self._record.stages.append(
            StageRecord(
                stage=stage,
                component=component,
                input_count=input_count,
                output_count=output_count,
                detail=_serialize(detail),
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 6),
            )
        )

    def finish_run(self, visible: list[ArticleSummary]) -> Path | None:
        """Write the run record to a JSON file.

        Args:
            visible: Final ordered articles produced by the pipeline.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        self._record.visible_count = len(visible)
        self._record.visible_ids = [a.id for a in visible]

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # run_2026-02-12T14-30-00_1a2b3c4d.json (colons -> dashes)
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filename = f"run_{ts}_{self._record.run_id[:8]}.json"
        filepath = self._log_dir / filename

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        self._record = None
        return filepath
