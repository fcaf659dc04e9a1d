from pathlib import Path

from property_importer.config.settings import Settings
from property_importer.database.connection import Database
from property_importer.database.repositories.property_repository import PropertyRepository
from property_importer.extraction.factory import ExtractorFactory
from property_importer.fetch.fetcher import DocumentFetcher
from property_importer.logging.logger import Log
from property_importer.pdf.factory import PdfExtractorFactory
from property_importer.processor.exceptions import StageError
from property_importer.processor.models import (
    ImportOutcome,
    ImportRequest,
    PipelineState,
    Stage,
    utc_now,
)
from property_importer.processor.pipeline import PipelineContext, PipelineStep
from property_importer.processor.steps import (
    ExtractAndArchiveStep,
    ExtractTextStep,
    FetchDocumentStep,
    PersistPropertyStep,
)
from property_importer.storage.factory import ArchiverFactory


class Processor:
    """Runs the import pipeline for one submitted document.

    Pipeline: fetch -> extract text -> (schema extraction || archive) -> persist.
    The first failing stage ends the run; nothing is retried or rolled back.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, request: ImportRequest) -> ImportOutcome:
        context = PipelineContext(request=request, submitted_at=utc_now())
        Log.info(f"Importing '{request.file_name}' from {request.document_url}")

        for step in self._steps:
            try:
                context = step.run(context)
            except StageError as exc:
                return self._fail(context, exc.stage, exc.cause)
            except Exception as exc:
                return self._fail(context, step.stage, exc)

        if context.record is None:
            raise RuntimeError("Pipeline finished without a persisted record")
        context.advance(PipelineState.SUCCEEDED)
        Log.info(f"Import of '{request.file_name}' succeeded")
        return ImportOutcome.succeeded(context.record, context.states)

    @staticmethod
    def _fail(context: PipelineContext, stage: Stage, cause: BaseException) -> ImportOutcome:
        context.advance(PipelineState.FAILED)
        outcome = ImportOutcome.failed(stage, cause, context.states)
        Log.error(f"Import of '{context.request.file_name}' failed at {stage.value}: {outcome.error}")
        return outcome


def build_processor(settings: Settings, database: Database) -> Processor:
    """Build a Processor with all required adapters."""
    local_root = settings.fetch_local_root.strip()
    fetcher = DocumentFetcher(
        timeout_seconds=settings.fetch_timeout_seconds,
        local_root=Path(local_root) if local_root else None,
    )
    pdf_extractor = PdfExtractorFactory.create(settings)
    extractor = ExtractorFactory.create(settings)
    archiver = ArchiverFactory.create(settings)
    repository = PropertyRepository(database)
    return Processor(
        steps=[
            FetchDocumentStep(fetcher),
            ExtractTextStep(pdf_extractor),
            ExtractAndArchiveStep(
                extractor,
                archiver,
                timeout_seconds=settings.concurrent_stage_timeout_seconds,
            ),
            PersistPropertyStep(repository),
        ]
    )
