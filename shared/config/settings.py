import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parents[2]


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "y"}


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite+aiosqlite:///./db.sqlite"
    template_dir: Path = BASE_DIR / "templates"
    static_dir: Path = BASE_DIR / "static"

    # Session cookie. Without a secret the cookie carries the raw username.
    cookie_name: str = "username"
    cookie_secure: bool = False
    session_secret: Optional[str] = None
    session_max_age_minutes: int = 480

    rate_limit_enabled: bool = True

    service_name: str = "storefront"
    metrics_enabled: bool = True
    otlp_endpoint: Optional[str] = None
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8080

    @property
    def signed_sessions(self) -> bool:
        return bool(self.session_secret)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            template_dir=Path(os.getenv("TEMPLATE_DIR", str(cls.template_dir))).resolve(),
            static_dir=Path(os.getenv("STATIC_DIR", str(cls.static_dir))).resolve(),
            cookie_name=os.getenv("SESSION_COOKIE_NAME", cls.cookie_name),
            cookie_secure=_env_bool("SESSION_COOKIE_SECURE", "false"),
            session_secret=os.getenv("SESSION_SECRET_KEY") or None,
            session_max_age_minutes=int(os.getenv("SESSION_MAX_AGE_MINUTES", "480")),
            rate_limit_enabled=_env_bool("RATE_LIMIT_ENABLED", "true"),
            service_name=os.getenv("SERVICE_NAME", cls.service_name),
            metrics_enabled=_env_bool("METRICS_ENABLED", "true"),
            otlp_endpoint=os.getenv("OTLP_ENDPOINT") or None,
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", "8080")),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
