import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigError

DEFAULT_MODEL_NAME = "gemini-2.0-flash"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_PORT = 9090
GENERATE_CONTENT_PATH = "/v1beta/models/{model}:generateContent"


@dataclass(frozen=True)
class Settings:
    api_base_url: str
    api_key: str
    model_name: str = DEFAULT_MODEL_NAME
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    cors_origins: tuple[str, ...] = field(default_factory=lambda: ("*",))
    log_level: str = "INFO"
    prompt_debug: bool = False
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    @property
    def generate_url(self) -> str:
        return self.api_base_url.rstrip("/") + GENERATE_CONTENT_PATH.format(model=self.model_name)


def _required(env: dict[str, str], name: str) -> str:
    value = (env.get(name) or "").strip()
    if not value:
        raise ConfigError(f"{name} is not set")
    return value


def _number(env: dict[str, str], name: str, default: float, cast=float):
    raw = (env.get(name) or "").strip()
    if not raw:
        return cast(default)
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc


def load_settings(env: dict[str, str] | None = None, dotenv_path: Path | None = None) -> Settings:
    # Load `.env` (if present) so local dev doesn't require re-exporting env vars.
    if env is None:
        load_dotenv(dotenv_path=dotenv_path or Path.cwd() / ".env")
        env = dict(os.environ)

    timeout_seconds = _number(env, "GEMINI_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
    if timeout_seconds <= 0:
        raise ConfigError("GEMINI_TIMEOUT_SECONDS must be positive")

    origins = [o.strip() for o in (env.get("CORS_ALLOW_ORIGINS") or "*").split(",") if o.strip()]

    return Settings(
        api_base_url=_required(env, "GEMINI_API_URL"),
        api_key=_required(env, "GEMINI_API_KEY"),
        model_name=(env.get("GEMINI_MODEL") or "").strip() or DEFAULT_MODEL_NAME,
        timeout_seconds=timeout_seconds,
        cors_origins=tuple(origins or ["*"]),
        log_level=(env.get("LOG_LEVEL") or "INFO").strip().upper(),
        prompt_debug=env.get("PROMPT_DEBUG", "0") == "1",
        host=(env.get("HOST") or "0.0.0.0").strip(),
        port=_number(env, "PORT", DEFAULT_PORT, cast=int),
    )
