import pymupdf

from property_importer.pdf.base import BasePdfExtractor
from property_importer.pdf.exceptions import ParseError
from property_importer.pdf.models import ExtractedText


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts page text from PDF using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.page_count == 0:
                    raise ParseError("PDF has no pages")
                pages: list[str] = []
                for number, page in enumerate(doc, start=1):
                    try:
                        pages.append(page.get_text().strip())
                    except Exception as exc:
                        raise ParseError(
                            f"pymupdf could not read page {number} "
                            f"after {len(pages)} page(s): {exc}"
                        ) from exc
        except ParseError:
            raise
        except Exception as exc:
            raise ParseError(f"pymupdf extraction failed: {exc}") from exc
        return ExtractedText(pages=tuple(pages))
