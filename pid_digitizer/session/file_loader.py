import mimetypes
from dataclasses import dataclass
from pathlib import Path

from pid_digitizer.session.exceptions import FileReadError

_FALLBACK_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class UploadedFile:
    """A file picked for analysis: its name, bytes and declared media type."""

    file_name: str
    data: bytes
    mime_type: str


class FileLoader:
    """Reads an input file from disk and guesses its media type from the extension."""

    def load(self, path: Path) -> UploadedFile:
        """Read a diagram file.

        Raises:
            FileReadError: if the path does not exist or cannot be read.
        """
        if not path.is_file():
            raise FileReadError(f"File not found: {path}")
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {path}: {exc}") from exc
        mime_type, _ = mimetypes.guess_type(path.name)
        return UploadedFile(
            file_name=path.name,
            data=data,
            mime_type=mime_type or _FALLBACK_MIME_TYPE,
        )
