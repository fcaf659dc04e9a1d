from abc import ABC, abstractmethod

from property_importer.pdf.models import ExtractedText


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        """Extract page texts from PDF bytes, preserving page order.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            ExtractedText with one fragment per page. Pages without text
            yield empty fragments; embedded images are ignored.

        Raises:
            ParseError: if the bytes are not a readable PDF, the document has
                no pages, or a page's text cannot be read.
        """
