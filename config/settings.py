"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings
from typing import Optional


DEFAULT_JWT_SECRET = "your_jwt_secret"


class Settings(BaseSettings):
    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = "postgresql+asyncpg://localhost:5432/user_management"

    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = DEFAULT_JWT_SECRET   # HMAC secret for auth tokens
    jwt_expiry_seconds: int = 3600         # 1 hour
    bcrypt_rounds: int = 10                # password hashing work factor

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 5000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_dir: Optional[str] = None   # writes combined.log / error.log when set

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET


config = Settings()
