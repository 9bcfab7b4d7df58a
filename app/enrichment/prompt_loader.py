from pathlib import Path

from app.enrichment.exceptions import EnrichmentError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the enrichment prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled enrichment_prompt.txt.

    Returns:
        The raw template string with placeholders.

    Raises:
        EnrichmentError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "enrichment_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EnrichmentError(f"Failed to load prompt template: {exc}") from exc
