from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_SUPER_ADMIN_ROLE_ID = 9


@dataclass(frozen=True)
class AppConfig:
    super_admin_role_id: int = DEFAULT_SUPER_ADMIN_ROLE_ID
    default_language: str = "en"

    @classmethod
    def from_env(cls, env_file: str = ".env") -> "AppConfig":
        load_dotenv(env_file)
        try:
            role_id = int(os.getenv("RENTAL_SUPER_ADMIN_ROLE_ID", str(DEFAULT_SUPER_ADMIN_ROLE_ID)))
        except ValueError as exc:
            raise ValueError("RENTAL_SUPER_ADMIN_ROLE_ID must be an integer") from exc
        config = cls(
            super_admin_role_id=role_id,
            default_language=os.getenv("RENTAL_DEFAULT_LANGUAGE", "en").strip().lower(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        if self.super_admin_role_id < 1:
            raise ValueError("RENTAL_SUPER_ADMIN_ROLE_ID must be >= 1")
        if self.default_language not in {"en", "ar"}:
            raise ValueError("RENTAL_DEFAULT_LANGUAGE must be 'en' or 'ar'")
