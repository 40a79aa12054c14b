from functools import lru_cache
from pathlib import Path
from urllib.parse import urlparse

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Codewave Web Hosting"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True  # Set to False in production

    # Storage
    storage_dir: Path = Path("storage")
    public_base_url: str | None = None  # e.g. "https://sites.example.com"; derived per request if unset

    # Uploads
    max_file_size: int = 10 * 1024 * 1024  # 10 MiB per file
    max_files: int = 20
    upload_rate_limit: str = "30/minute"

    # Security
    cors_origins: list[str] = ["http://localhost:3000"]
    # CSP for production (no unsafe-inline, no external CDN) - set to empty string to use default
    csp_production: str = "default-src 'self'; frame-ancestors 'none'"

    # reCAPTCHA
    recaptcha_secret: str | None = None
    recaptcha_verify_url: str = "https://www.google.com/recaptcha/api/siteverify"
    upstream_timeout_seconds: float = 10.0

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @field_validator("public_base_url")
    @classmethod
    def validate_public_base_url(cls, v: str | None) -> str | None:
        """Require an absolute http(s) URL and drop any trailing slash."""
        if v is None or not v.strip():
            return None
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"PUBLIC_BASE_URL must be an absolute http(s) URL, got '{v}'")
        return v.rstrip("/")

    @field_validator("max_file_size", "max_files")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Upload limits must be positive")
        return v

    @property
    def sites_dir(self) -> Path:
        """Directory holding one subdirectory per hosted project."""
        return self.storage_dir / "sites"

    @property
    def projects_file(self) -> Path:
        """JSON document holding the project records."""
        return self.storage_dir / "projects.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
