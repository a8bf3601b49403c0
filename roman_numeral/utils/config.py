"""Load and read environment variables. Uses python-dotenv.

Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
import os


def _project_root() -> Path:
    """Resolve project root (the directory holding app.py and .env)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Existing environment variables win over .env values.
    """
    load_dotenv(_project_root() / ".env", override=False)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_int(key: str, default: int) -> int:
    """Get optional env var as int; return default if missing or invalid."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_optional_float(key: str, default: float) -> float:
    """Get optional env var as float; return default if missing, invalid or <= 0."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


# --- Public config accessors ---

def host() -> str:
    """Optional: bind address for the API server. Default 0.0.0.0."""
    return get_optional("HOST", "0.0.0.0")


def port() -> int:
    """Optional: API server port. Default 8080."""
    return get_optional_int("PORT", 8080)


def app_env() -> str:
    """Optional: environment name. Default development."""
    return get_optional("APP_ENV", "development").lower()


def is_development() -> bool:
    return app_env() == "development"


def log_level() -> str:
    """Optional: LOG_LEVEL override. Defaults to DEBUG in development, INFO elsewhere."""
    default = "DEBUG" if is_development() else "INFO"
    return get_optional("LOG_LEVEL", default).upper()


def log_dir() -> Optional[Path]:
    """
    Optional: directory for log files. Default <project root>/logs.
    Set LOG_DIR to an empty value in the environment to disable file logging.
    """
    load_config()
    raw = os.getenv("LOG_DIR")
    if raw is None:
        return _project_root() / "logs"
    raw = raw.strip()
    return Path(raw) if raw else None


def api_base_url() -> str:
    """Optional: base URL of the conversion API used by the UI. Default http://localhost:8080."""
    return get_optional("ROMAN_API_URL", "http://localhost:8080").rstrip("/")


def api_timeout_seconds() -> float:
    """Optional: API client timeout in seconds. Default 10."""
    return get_optional_float("ROMAN_API_TIMEOUT", 10.0)
