"""
Bot id lookup from AWS Secrets Manager.

Only used when GROUPME_BOT_ID is empty and GROUPME_BOT_ID_SECRET_NAME is set.
"""

from __future__ import annotations

import functools
import importlib
import json

from .config import Settings

SECRET_KEY = "GROUPME_BOT_ID"


def _boto3():
    # Allow tests to monkeypatch module-level `boto3` symbol.
    return globals().get("boto3") or importlib.import_module("boto3")


@functools.lru_cache(maxsize=None)
def fetch_bot_id(secret_name: str) -> str:
    """Read the bot id from a secret holding either the raw id or a JSON object.

    Cached for the life of the process (one lookup per Lambda cold start).
    """
    client = _boto3().client("secretsmanager")
    raw = client.get_secret_value(SecretId=secret_name).get("SecretString") or ""
    try:
        data = json.loads(raw)
    except ValueError:
        return raw.strip()
    if isinstance(data, dict):
        return str(data.get(SECRET_KEY) or "").strip()
    return raw.strip()


def resolve_bot_id(settings: Settings) -> str:
    if settings.bot_id:
        return settings.bot_id
    if settings.bot_id_secret_name:
        return fetch_bot_id(settings.bot_id_secret_name)
    return ""
