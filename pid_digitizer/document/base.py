from abc import ABC, abstractmethod


class BasePdfRenderer(ABC):
    """Contract for all PDF rasterization adapters."""

    @abstractmethod
    def render_first_page(
        self,
        pdf_bytes: bytes,
        *,
        scale: float,
        jpeg_quality: int,
    ) -> bytes:
        """Render page 1 of a PDF to JPEG bytes.

        Args:
            pdf_bytes: Raw PDF file content.
            scale: Upscale factor applied to the page's native size.
            jpeg_quality: JPEG quality, 1-100.

        Returns:
            Encoded JPEG image bytes.

        Raises:
            DocumentConversionError: if the PDF cannot be opened or rendered.
        """
