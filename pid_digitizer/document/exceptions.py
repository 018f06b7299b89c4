class DocumentConversionError(Exception):
    """Raised when a source document cannot be turned into a raster image."""


class UnsupportedDocumentTypeError(DocumentConversionError):
    """Raised when the declared media type is neither an image nor a PDF."""
