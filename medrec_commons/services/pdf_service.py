import logging
from io import BytesIO

from xhtml2pdf import pisa

from ..core.exceptions import ResourceCreationException


logger = logging.getLogger(__name__)


class PdfGenerationError(ResourceCreationException):
    pass


def generate_pdf(html_content: str) -> bytes:
    """Render an HTML document to PDF bytes."""
    buffer = BytesIO()
    status = pisa.CreatePDF(src=html_content, dest=buffer, encoding="utf-8")
    if status.err:
        logger.error(f"PDF rendering reported {status.err} error(s)")
        raise PdfGenerationError(f"Failed to render PDF: {status.err} error(s) reported by renderer")

    return buffer.getvalue()
