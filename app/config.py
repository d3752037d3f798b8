# app/config.py

import os
import warnings
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

INSECURE_DEV_SECRET = "INSECURE-DEV-KEY-CHANGE-IN-PRODUCTION"  # noqa: S105 - dev fallback only


@dataclass
class Settings:
    database_url: str = "sqlite:///./dental.db"
    access_token_secret: str = INSECURE_DEV_SECRET
    stripe_secret_key: Optional[str] = None
    stripe_api_base: str = "https://api.stripe.com"
    payment_timeout_seconds: float = 30.0
    db_timeout_seconds: float = 10.0
    port: int = 5000
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    seed_catalog: bool = True
    log_level: str = "INFO"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def load_settings() -> Settings:
    """Read settings from the environment (and a .env file, if present)."""
    secret = os.getenv("ACCESS_TOKEN")
    if not secret:
        warnings.warn(
            "ACCESS_TOKEN not set! Using insecure default - DO NOT USE IN PRODUCTION",
            RuntimeWarning,
            stacklevel=2,
        )
        secret = INSECURE_DEV_SECRET

    origins = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()]

    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./dental.db"),
        access_token_secret=secret,
        stripe_secret_key=os.getenv("STRIPE_SECRET_KEY") or None,
        stripe_api_base=os.getenv("STRIPE_API_BASE", "https://api.stripe.com"),
        payment_timeout_seconds=float(os.getenv("PAYMENT_TIMEOUT_SECONDS", "30")),
        db_timeout_seconds=float(os.getenv("DB_TIMEOUT_SECONDS", "10")),
        port=int(os.getenv("PORT", "5000")),
        allowed_origins=origins or ["*"],
        seed_catalog=_env_flag("SEED_CATALOG", "true"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
