import io

import pdfplumber

from pid_digitizer.document.base import BasePdfRenderer
from pid_digitizer.document.exceptions import DocumentConversionError

_PDF_POINTS_PER_INCH = 72


class PdfPlumberRenderer(BasePdfRenderer):
    """Rasterizes the first PDF page using pdfplumber (pypdfium2 backend)."""

    def render_first_page(
        self,
        pdf_bytes: bytes,
        *,
        scale: float,
        jpeg_quality: int,
    ) -> bytes:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                if not pdf.pages:
                    raise DocumentConversionError("PDF has no pages")
                page_image = pdf.pages[0].to_image(
                    resolution=round(_PDF_POINTS_PER_INCH * scale)
                )
                image = page_image.original.convert("RGB")
            buf = io.BytesIO()
            image.save(buf, format="JPEG", quality=jpeg_quality)
            return buf.getvalue()
        except DocumentConversionError:
            raise
        except Exception as exc:
            raise DocumentConversionError(f"pdfplumber rendering failed: {exc}") from exc
