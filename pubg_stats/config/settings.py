"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from pubg_stats import __homepage__, __version__
from pubg_stats.domain.errors import ConfigurationError

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


class Settings:
    """Environment-backed settings, read once at import time."""

    PUBG_API_KEY: str = os.getenv('PUBG_API_KEY', '')

    # ── API ────────────────────────────────────────────────────────────────
    BASE_URL:      str = os.getenv('PUBG_BASE_URL', 'https://api.pubg.com').rstrip('/')
    DEFAULT_SHARD: str = os.getenv('PUBG_DEFAULT_SHARD', 'pc-oc')
    USER_AGENT:    str = f"pubg-stats v{__version__} ({__homepage__})"

    # ── HTTP ───────────────────────────────────────────────────────────────
    # Handed to httpx as-is; the client imposes no timeout of its own.
    REQUEST_TIMEOUT: float = float(os.getenv('REQUEST_TIMEOUT', '30'))

    # ── Paths ──────────────────────────────────────────────────────────────
    # JSON-lines log files are only written when LOG_DIR is set
    LOG_DIR: Optional[Path] = Path(os.environ['LOG_DIR']) if os.getenv('LOG_DIR') else None

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.PUBG_API_KEY:
            raise ConfigurationError("PUBG_API_KEY must be set in the environment or config/.env")

    @classmethod
    def create_directories(cls) -> None:
        if cls.LOG_DIR:
            cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
