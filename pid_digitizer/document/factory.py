from pid_digitizer.config.settings import Settings
from pid_digitizer.document.base import BasePdfRenderer
from pid_digitizer.document.normalizer import DocumentNormalizer
from pid_digitizer.document.pdfplumber_adapter import PdfPlumberRenderer
from pid_digitizer.document.pymupdf_adapter import PyMuPdfRenderer


class PdfRendererFactory:
    """Creates the correct PDF renderer based on settings."""

    ADAPTERS: dict[str, type[BasePdfRenderer]] = {
        "pdfplumber": PdfPlumberRenderer,
        "pymupdf": PyMuPdfRenderer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfRenderer:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()


def build_document_normalizer(settings: Settings) -> DocumentNormalizer:
    """Build a DocumentNormalizer with the configured renderer and encoding."""
    return DocumentNormalizer(
        renderer=PdfRendererFactory.create(settings),
        scale=settings.pdf_render_scale,
        jpeg_quality=settings.pdf_jpeg_quality,
    )
