from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import Any

from property_importer.database.models import PropertyRecord
from property_importer.database.repositories.property_repository import PropertyRepository
from property_importer.extraction.base import BasePropertyExtractor
from property_importer.fetch.fetcher import DocumentFetcher
from property_importer.logging.logger import Log
from property_importer.pdf.base import BasePdfExtractor
from property_importer.processor.exceptions import StageError
from property_importer.processor.models import PipelineState, Stage, SubmittedDocument
from property_importer.processor.pipeline import PipelineContext, PipelineStep
from property_importer.storage.base import BaseArtifactArchiver


class FetchDocumentStep(PipelineStep):
    stage = Stage.FETCH

    def __init__(self, fetcher: DocumentFetcher) -> None:
        self._fetcher = fetcher

    def run(self, context: PipelineContext) -> PipelineContext:
        content = self._fetcher.fetch(context.request.document_url)
        context.document = SubmittedDocument(
            content=content,
            name=context.request.file_name,
            submitted_at=context.submitted_at,
        )
        context.advance(PipelineState.FETCHED)
        Log.info(f"Fetched {len(content)} bytes for '{context.request.file_name}'")
        return context


class ExtractTextStep(PipelineStep):
    stage = Stage.TEXT_EXTRACT

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before text extraction")
        context.extracted_text = self._pdf_extractor.extract(context.document.content)
        context.advance(PipelineState.TEXT_EXTRACTED)
        Log.info(
            f"Extracted {len(context.extracted_text.text)} chars from "
            f"{context.extracted_text.page_count} page(s) of '{context.document.name}'"
        )
        return context


class ExtractAndArchiveStep(PipelineStep):
    """Runs the model call and the archive write side by side.

    Both are joined before the step returns; if either fails the step fails
    and nothing after it runs. A task still in flight when the other fails is
    left to finish on its own.
    """

    stage = Stage.SCHEMA_EXTRACT

    def __init__(
        self,
        extractor: BasePropertyExtractor,
        archiver: BaseArtifactArchiver,
        timeout_seconds: float | None = None,
    ) -> None:
        self._extractor = extractor
        self._archiver = archiver
        self._timeout = timeout_seconds

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None or context.extracted_text is None:
            raise ValueError(
                "PipelineContext.document and extracted_text must be set before extraction"
            )
        pool = ThreadPoolExecutor(max_workers=2, thread_name_prefix="extract-archive")
        try:
            futures: dict[Stage, Future[Any]] = {
                Stage.SCHEMA_EXTRACT: pool.submit(
                    self._extractor.extract, context.extracted_text.text
                ),
                Stage.ARCHIVE: pool.submit(self._archiver.archive, context.document),
            }
            done, pending = wait(
                futures.values(), timeout=self._timeout, return_when=FIRST_EXCEPTION
            )
        finally:
            pool.shutdown(wait=False, cancel_futures=True)

        for stage, future in futures.items():
            if future in done and future.exception() is not None:
                if pending:
                    Log.warning(f"{stage.value} failed while another task was still running")
                raise StageError(stage, future.exception())  # type: ignore[arg-type]
        for stage, future in futures.items():
            if future in pending:
                raise StageError(
                    stage, TimeoutError(f"{stage.value} did not finish within {self._timeout}s")
                )

        context.property_data = futures[Stage.SCHEMA_EXTRACT].result()
        context.advance(PipelineState.SCHEMA_EXTRACTED)
        context.archived = futures[Stage.ARCHIVE].result()
        context.advance(PipelineState.ARCHIVED)
        Log.info(f"Archived '{context.document.name}' at {context.archived.storage_path}")
        return context


class PersistPropertyStep(PipelineStep):
    stage = Stage.PERSIST

    def __init__(self, repository: PropertyRepository) -> None:
        self._repository = repository

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.property_data is None or context.archived is None:
            raise ValueError(
                "PipelineContext.property_data and archived must be set before persist"
            )
        record = PropertyRecord.from_extraction(
            context.property_data,
            context.archived,
            context.request.file_name,
        )
        context.record = self._repository.insert(record)
        context.advance(PipelineState.PERSISTED)
        Log.info(f"Persisted property {context.record.id} from '{context.request.file_name}'")
        return context
