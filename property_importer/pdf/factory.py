from property_importer.config.settings import Settings
from property_importer.pdf.base import BasePdfExtractor
from property_importer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from property_importer.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the text extractor for the configured PDF engine."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ADAPTERS)}"
            )
        return adapter_cls()
