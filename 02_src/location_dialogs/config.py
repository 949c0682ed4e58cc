"""Project-level configuration and path helpers."""

from pathlib import Path
from typing import Union

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"
BUNDLES_DIR = Path(__file__).resolve().parent / "resources" / "bundles"

NEUTRAL_LOCALE = "en"
DEFAULT_LOCALE = NEUTRAL_LOCALE

LOGS_DIR.mkdir(parents=True, exist_ok=True)


PathLike = Union[str, Path]


def resolve_locale(env_value: str | None = None) -> str:
    """Normalize DIALOG_LOCALE to a lowercase, dash-separated tag."""
    if not env_value or not env_value.strip():
        return DEFAULT_LOCALE

    return env_value.strip().replace("_", "-").lower()


def resolve_bundle_dir(env_value: PathLike | None = None) -> Path:
    """Resolve DIALOG_BUNDLE_DIR to an absolute path."""
    if not env_value:
        return BUNDLES_DIR

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate
