"""
Configuration helpers and defaults.

Assembled once at process start and passed into the client and dispatcher;
the core never reads the environment itself.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

BOT_POST_URL = "https://api.groupme.com/v3/bots/post"


def _env(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name)
    return v if v is not None else default


def _flag(name: str, default: str = "false") -> bool:
    return (_env(name, default) or default).strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    bot_id: str
    bot_id_secret_name: str | None
    group_id: str | None
    api_url: str
    timeout_seconds: float
    test_mode: bool
    port: int


def load_settings() -> Settings:
    """Load settings from environment with safe defaults for local tests."""

    return Settings(
        bot_id=(_env("GROUPME_BOT_ID", "") or "").strip(),
        bot_id_secret_name=_env("GROUPME_BOT_ID_SECRET_NAME") or None,
        group_id=(_env("GROUPME_GROUP_ID") or "").strip() or None,
        api_url=_env("GROUPME_API_URL", BOT_POST_URL) or BOT_POST_URL,
        timeout_seconds=float(_env("GROUPME_TIMEOUT_SECONDS", "8") or 8),
        test_mode=_flag("GROUPME_TEST_MODE"),
        port=int(_env("PORT", "8080") or 8080),
    )
