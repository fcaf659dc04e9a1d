import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _pdf(*pages: list[str]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf(["Hello PDF World"])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf(["Page one content"], ["Page two content"])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _pdf([])


@pytest.fixture()
def listing_pdf_bytes() -> bytes:
    """Two-page property brochure with the key listing facts on page one."""
    return _pdf(
        ["123 Example St, $950,000, 4 bed, 2 bath", "Sunny family home close to schools."],
        ["Features: solar panels, ducted heating, double garage"],
    )
