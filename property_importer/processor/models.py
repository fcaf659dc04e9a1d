from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from property_importer.database.models import PropertyRecord


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class Stage(str, Enum):
    FETCH = "fetch"
    TEXT_EXTRACT = "text_extract"
    SCHEMA_EXTRACT = "schema_extract"
    ARCHIVE = "archive"
    PERSIST = "persist"


# What the caller is told went wrong, per stage.
STAGE_EFFECTS: dict[Stage, str] = {
    Stage.FETCH: "Failed to fetch PDF",
    Stage.TEXT_EXTRACT: "PDF parsing error",
    Stage.SCHEMA_EXTRACT: "AI extraction error",
    Stage.ARCHIVE: "Storage upload error",
    Stage.PERSIST: "Database insert error",
}


class PipelineState(str, Enum):
    SUBMITTED = "submitted"
    FETCHED = "fetched"
    TEXT_EXTRACTED = "text_extracted"
    SCHEMA_EXTRACTED = "schema_extracted"
    ARCHIVED = "archived"
    PERSISTED = "persisted"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ImportRequest:
    """What a caller submits: where the PDF lives and what to call it."""

    document_url: str
    file_name: str


@dataclass(frozen=True)
class SubmittedDocument:
    """Raw PDF bytes owned by a single pipeline invocation."""

    content: bytes
    name: str
    submitted_at: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class ImportOutcome:
    """Terminal result of one pipeline run."""

    state: PipelineState
    record: "PropertyRecord | None" = None
    failed_stage: Stage | None = None
    cause: BaseException | None = None
    states: tuple[PipelineState, ...] = ()

    @classmethod
    def succeeded(
        cls, record: "PropertyRecord", states: list[PipelineState]
    ) -> "ImportOutcome":
        return cls(state=PipelineState.SUCCEEDED, record=record, states=tuple(states))

    @classmethod
    def failed(
        cls, stage: Stage, cause: BaseException, states: list[PipelineState]
    ) -> "ImportOutcome":
        return cls(
            state=PipelineState.FAILED,
            failed_stage=stage,
            cause=cause,
            states=tuple(states),
        )

    @property
    def ok(self) -> bool:
        return self.state is PipelineState.SUCCEEDED

    @property
    def error(self) -> str | None:
        """Stage effect plus cause text, e.g. 'Database insert error: ...'."""
        if self.failed_stage is None:
            return None
        detail = str(self.cause).strip() if self.cause is not None else ""
        if not detail and self.cause is not None:
            detail = type(self.cause).__name__
        return f"{STAGE_EFFECTS[self.failed_stage]}: {detail}"
