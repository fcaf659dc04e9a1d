from property_importer.extraction.base import BasePropertyExtractor
from property_importer.extraction.extractor import PropertyExtractor
from property_importer.extraction.factory import ExtractorFactory
from property_importer.extraction.models import PropertyData

__all__ = ["BasePropertyExtractor", "ExtractorFactory", "PropertyData", "PropertyExtractor"]
