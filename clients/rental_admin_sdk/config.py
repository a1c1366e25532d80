from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = "http://localhost:3000"
API_PREFIX = "/api/v1/admin"
SUPPORTED_LANGUAGES = ("en", "ar")


@dataclass(frozen=True)
class SDKConfig:
    base_url: str
    timeout_seconds: float
    verify_ssl: bool
    retry_max_attempts: int
    retry_backoff_ms: int
    language: str = "en"

    @classmethod
    def from_env(cls, env_file: str = ".env") -> "SDKConfig":
        load_dotenv(env_file)
        base_url = _normalize_base_url(os.getenv("RENTAL_API_BASE_URL", DEFAULT_BASE_URL))
        timeout_seconds = float(os.getenv("RENTAL_API_TIMEOUT_SECONDS", "30"))
        verify_ssl = parse_bool(os.getenv("RENTAL_API_VERIFY_SSL", "true"), default=True)
        retry_max_attempts = max(1, int(os.getenv("RENTAL_API_RETRY_MAX_ATTEMPTS", "3")))
        retry_backoff_ms = max(0, int(os.getenv("RENTAL_API_RETRY_BACKOFF_MS", "150")))
        language = normalize_language(os.getenv("RENTAL_API_LANGUAGE", "en"))
        return cls(
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            verify_ssl=verify_ssl,
            retry_max_attempts=retry_max_attempts,
            retry_backoff_ms=retry_backoff_ms,
            language=language,
        )


def _normalize_base_url(value: str) -> str:
    normalized = value.strip()
    if not normalized:
        return DEFAULT_BASE_URL
    return normalized.rstrip("/")


def normalize_language(value: str | None) -> str:
    normalized = (value or "").strip().lower()
    return normalized if normalized in SUPPORTED_LANGUAGES else "en"


def parse_bool(value: str | bool | None, default: bool = True) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return default

    normalized = str(value).strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default
