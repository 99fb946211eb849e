from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _strip_trailing_slash(url: str) -> str:
    """Normalise service base URLs so path joins never produce ``//v1``."""
    return url.rstrip("/")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Consul and Nomad addresses point at the HTTP APIs of the local cluster.
    Both clients share one request timeout; nothing is retried on expiry.

    Accepted address formats
    ────────────────────────
    • http://consul:8500
    • http://consul:8500/     (trailing slash is dropped at startup)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Consul KV: deployment configs are stored under apps/<name>/config
    consul_addr: str = "http://consul:8500"

    # Nomad: parameterized job templates are dispatched here
    nomad_addr: str = "http://nomad:4646"

    @field_validator("consul_addr", "nomad_addr", "github_base_url", mode="before")
    @classmethod
    def normalise_base_url(cls, v: str) -> str:
        return _strip_trailing_slash(v)

    http_timeout_seconds: float = 30.0

    # Clone destination root. Each slug lands in <repos_dir>/<owner>_<repo>.
    repos_dir: str = "/app/repos"
    github_base_url: str = "https://github.com"
    clone_timeout_seconds: int = 300

    # CORS: JSON array of allowed origins, e.g. CORS_ORIGINS='["http://localhost:3000"]'
    cors_origins: list[str] = ["*"]

    # App
    debug: bool = True
    port: int = 3000


def get_settings() -> Settings:
    return Settings()
