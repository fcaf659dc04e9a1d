from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from property_importer.database.models import PropertyRecord
from property_importer.extraction.models import PropertyData
from property_importer.pdf.models import ExtractedText
from property_importer.processor.models import (
    ImportRequest,
    PipelineState,
    Stage,
    SubmittedDocument,
)
from property_importer.storage.models import ArchivedDocumentRef


@dataclass(slots=True)
class PipelineContext:
    request: ImportRequest
    submitted_at: datetime
    document: SubmittedDocument | None = None
    extracted_text: ExtractedText | None = None
    property_data: PropertyData | None = None
    archived: ArchivedDocumentRef | None = None
    record: PropertyRecord | None = None
    states: list[PipelineState] = field(
        default_factory=lambda: [PipelineState.SUBMITTED]
    )

    @property
    def state(self) -> PipelineState:
        return self.states[-1]

    def advance(self, state: PipelineState) -> None:
        self.states.append(state)


class PipelineStep(ABC):
    stage: ClassVar[Stage]

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
