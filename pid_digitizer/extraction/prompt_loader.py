from pathlib import Path

from pid_digitizer.extraction.exceptions import ExtractionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def _read(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load {what}: {exc}") from exc


def load_system_instruction(path: Path | None = None) -> str:
    """Load the system instruction describing what to detect and how.

    Args:
        path: Path to the instruction file.
              Defaults to the bundled system_instruction.txt.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "system_instruction.txt", "system instruction")


def load_analysis_prompt(path: Path | None = None) -> str:
    """Load the per-image user instruction (bundled analysis_prompt.txt by default)."""
    return _read(path or _DEFAULT_PROMPT_DIR / "analysis_prompt.txt", "analysis prompt")


def load_json_schema(path: Path | None = None) -> str:
    """Load the component array JSON schema.

    Args:
        path: Path to the JSON schema file.
              Defaults to the bundled component_schema.json.

    Returns:
        The raw JSON schema string.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "component_schema.json", "JSON schema")
