import pymupdf

from pid_digitizer.document.base import BasePdfRenderer
from pid_digitizer.document.exceptions import DocumentConversionError


class PyMuPdfRenderer(BasePdfRenderer):
    """Rasterizes the first PDF page using PyMuPDF."""

    def render_first_page(
        self,
        pdf_bytes: bytes,
        *,
        scale: float,
        jpeg_quality: int,
    ) -> bytes:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.page_count == 0:
                    raise DocumentConversionError("PDF has no pages")
                pixmap = doc[0].get_pixmap(matrix=pymupdf.Matrix(scale, scale), alpha=False)
                return pixmap.tobytes(output="jpeg", jpg_quality=jpeg_quality)
        except DocumentConversionError:
            raise
        except Exception as exc:
            raise DocumentConversionError(f"pymupdf rendering failed: {exc}") from exc
