import io

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a single-page letter PDF with a pump symbol and its tag."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.circle(200, 500, 30)
    c.line(100, 500, 170, 500)
    c.drawString(185, 450, "P-101A")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a portrait letter page followed by a wide landscape page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Sheet 1")
    c.showPage()
    c.setPageSize((1000, 400))
    c.drawString(72, 300, "Sheet 2")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (64, 48), color=(255, 255, 255)).save(buf, format="PNG")
    return buf.getvalue()
