from unittest.mock import MagicMock

import pytest

from property_importer.pdf.factory import PdfExtractorFactory
from property_importer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from property_importer.pdf.pymupdf_adapter import PyMuPdfAdapter


def _settings(engine: str) -> MagicMock:
    settings = MagicMock()
    settings.pdf_engine = engine
    return settings


class TestPdfExtractorFactory:
    def test_creates_pdfplumber(self) -> None:
        assert isinstance(PdfExtractorFactory.create(_settings("pdfplumber")), PdfPlumberAdapter)

    def test_creates_pymupdf(self) -> None:
        assert isinstance(PdfExtractorFactory.create(_settings("pymupdf")), PyMuPdfAdapter)

    def test_engine_name_is_case_insensitive(self) -> None:
        assert isinstance(PdfExtractorFactory.create(_settings("PyMuPDF")), PyMuPdfAdapter)

    def test_unknown_engine_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfExtractorFactory.create(_settings("tesseract"))
