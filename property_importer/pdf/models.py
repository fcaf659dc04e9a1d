from dataclasses import dataclass

PAGE_SEPARATOR = "\n"


@dataclass(frozen=True)
class ExtractedText:
    """Page-level text fragments of one document, in page order."""

    pages: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        """All pages joined with a single separator; empty document gives ''."""
        return PAGE_SEPARATOR.join(self.pages).strip()

    @property
    def page_count(self) -> int:
        return len(self.pages)
