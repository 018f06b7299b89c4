"""Turns an uploaded diagram into a single raster image for the vision model."""

import base64
from dataclasses import dataclass

from pid_digitizer.document.base import BasePdfRenderer
from pid_digitizer.document.exceptions import (
    DocumentConversionError,
    UnsupportedDocumentTypeError,
)
from pid_digitizer.logging.logger import Log

PDF_MIME_TYPE = "application/pdf"
JPEG_MIME_TYPE = "image/jpeg"


@dataclass(frozen=True)
class NormalizedDocument:
    """Image payload sent to the model plus the inline preview kept with the record."""

    image_bytes: bytes
    mime_type: str
    preview_data_url: str


def is_pdf(mime_type: str) -> bool:
    return mime_type.strip().lower() == PDF_MIME_TYPE


def is_image(mime_type: str) -> bool:
    return mime_type.strip().lower().startswith("image/")


def to_data_url(data: bytes, mime_type: str) -> str:
    """Encode bytes as a base64 data URL."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


class DocumentNormalizer:
    """Renders PDFs (first page only) to JPEG and passes raster images through."""

    def __init__(
        self,
        *,
        renderer: BasePdfRenderer,
        scale: float = 2.0,
        jpeg_quality: int = 85,
    ) -> None:
        self._renderer = renderer
        self._scale = scale
        self._jpeg_quality = jpeg_quality

    def normalize(self, data: bytes, mime_type: str) -> NormalizedDocument:
        """Produce the model payload and preview for one uploaded file.

        Raises:
            UnsupportedDocumentTypeError: if mime_type is not a PDF or image type.
            DocumentConversionError: if the file is empty or cannot be rendered.
        """
        if not data:
            raise DocumentConversionError("Uploaded file is empty")

        if is_pdf(mime_type):
            jpeg = self._renderer.render_first_page(
                data,
                scale=self._scale,
                jpeg_quality=self._jpeg_quality,
            )
            Log.info(
                f"Rendered PDF page 1 at {self._scale}x to {len(jpeg)} bytes of JPEG"
            )
            return NormalizedDocument(
                image_bytes=jpeg,
                mime_type=JPEG_MIME_TYPE,
                preview_data_url=to_data_url(jpeg, JPEG_MIME_TYPE),
            )

        if is_image(mime_type):
            return NormalizedDocument(
                image_bytes=data,
                mime_type=mime_type,
                preview_data_url=to_data_url(data, mime_type),
            )

        raise UnsupportedDocumentTypeError(
            f"Unsupported media type '{mime_type}'. Upload an image or a PDF."
        )
