import io

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from app.logging.logger import Log
from app.usage.ledger import UsageLedger
from app.usage.memory_store import InMemoryLedgerStore


@pytest.fixture(autouse=True, scope="session")
def _configure_logging() -> None:
    Log.configure("DEBUG")


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a Word document with two paragraphs and a small table."""
    document = docx.Document()
    document.add_paragraph("Refunds are accepted within 30 days.")
    document.add_paragraph("Store credit only after 14 days.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Limit"
    table.rows[0].cells[1].text = "5 items"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def ledger() -> UsageLedger:
    return UsageLedger(InMemoryLedgerStore(), cost_per_call=0.01)
