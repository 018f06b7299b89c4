from pathlib import Path

import pytest

from pid_digitizer.session.exceptions import FileReadError
from pid_digitizer.session.file_loader import FileLoader, UploadedFile


class TestLoadReturnsUpload:
    def test_reads_bytes_and_name(self, tmp_path: Path) -> None:
        path = tmp_path / "unit-7.pdf"
        path.write_bytes(b"%PDF test content")

        result = FileLoader().load(path)

        assert result == UploadedFile(
            file_name="unit-7.pdf",
            data=b"%PDF test content",
            mime_type="application/pdf",
        )

    @pytest.mark.parametrize(
        ("name", "mime_type"),
        [
            ("diagram.png", "image/png"),
            ("diagram.jpg", "image/jpeg"),
            ("diagram.PDF", "application/pdf"),
        ],
    )
    def test_guesses_mime_type_from_extension(
        self, tmp_path: Path, name: str, mime_type: str
    ) -> None:
        path = tmp_path / name
        path.write_bytes(b"data")
        assert FileLoader().load(path).mime_type == mime_type

    def test_unknown_extension_falls_back_to_octet_stream(self, tmp_path: Path) -> None:
        path = tmp_path / "diagram"
        path.write_bytes(b"data")
        assert FileLoader().load(path).mime_type == "application/octet-stream"


class TestLoadRaises:
    def test_raises_when_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError, match="File not found"):
            FileLoader().load(tmp_path / "missing.pdf")

    def test_raises_for_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError, match="File not found"):
            FileLoader().load(tmp_path)

    def test_wraps_os_errors(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "locked.pdf"
        path.write_bytes(b"%PDF")

        def _deny(self: Path) -> bytes:
            raise PermissionError("denied")

        monkeypatch.setattr(Path, "read_bytes", _deny)
        with pytest.raises(FileReadError, match="Failed to read"):
            FileLoader().load(path)
