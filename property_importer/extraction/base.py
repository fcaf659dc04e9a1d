from abc import ABC, abstractmethod

from property_importer.extraction.models import PropertyData


class BasePropertyExtractor(ABC):
    """Contract for schema-constrained property extractors."""

    @abstractmethod
    def extract(self, text: str) -> PropertyData:
        """Turn extracted document text into structured property fields.

        Args:
            text: Concatenated page text; may be empty or very large.

        Returns:
            PropertyData with unrecognized or absent fields set to None.

        Raises:
            ExtractionError: on model call failure or an unusable response.
        """
