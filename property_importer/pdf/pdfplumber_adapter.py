import io

import pdfplumber
from pdfplumber.page import Page

from property_importer.pdf.base import BasePdfExtractor
from property_importer.pdf.exceptions import ParseError
from property_importer.pdf.models import ExtractedText


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts page text from PDF using pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                if not pdf.pages:
                    raise ParseError("PDF has no pages")
                pages: list[str] = []
                for number, page in enumerate(pdf.pages, start=1):
                    pages.append(self._page_text(page, number, len(pages)))
        except ParseError:
            raise
        except Exception as exc:
            raise ParseError(f"pdfplumber extraction failed: {exc}") from exc
        return ExtractedText(pages=tuple(pages))

    @staticmethod
    def _page_text(page: Page, number: int, pages_read: int) -> str:
        try:
            return (page.extract_text() or "").strip()
        except Exception as exc:
            raise ParseError(
                f"pdfplumber could not read page {number} "
                f"after {pages_read} page(s): {exc}"
            ) from exc
