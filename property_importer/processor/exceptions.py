from property_importer.processor.models import Stage


class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class StageError(ProcessorError):
    """Wraps the failure of one pipeline stage with that stage's identity."""

    def __init__(self, stage: Stage, cause: BaseException) -> None:
        super().__init__(f"{stage.value} failed: {cause}")
        self.stage = stage
        self.cause = cause
