"""
AWS Lambda handler for GroupMe callbacks and EventBridge weekly suggestions.
"""

from __future__ import annotations

import base64
import json
import logging
import os
import time
from typing import Any

from .config import load_settings
from .dispatcher import build_dispatcher
from .errors import BotError, http_status

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level_name = (os.getenv("LOG_LEVEL") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)
    root = logging.getLogger()
    if root.level and root.level > level:
        root.setLevel(level)


def _rid(context: Any) -> str | None:
    return getattr(context, "aws_request_id", None)


def _log(msg: str, **fields: Any) -> None:
    try:
        rec = {"msg": msg, **fields}
        logger.info(json.dumps(rec, ensure_ascii=False))
    except (TypeError, ValueError):
        # Fallback to plain log
        logger.info("%s | %s", msg, fields)


def _response(status: int, body: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, ensure_ascii=False),
    }


def _get_body(event: dict[str, Any]) -> str | bytes:
    body = event.get("body")
    if event.get("isBase64Encoded"):
        body = base64.b64decode(body or b"")
    return body or ""


def _get_header(event: dict[str, Any], name: str) -> str | None:
    headers = event.get("headers") or {}
    for k, v in headers.items():
        if k.lower() == name.lower():
            return v
    return None


def _method(event: dict[str, Any]) -> str:
    # REST API events carry httpMethod; HTTP API / Function URL use requestContext.http
    method = event.get("httpMethod")
    if not method:
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method")
    return (method or "POST").upper()


def _path(event: dict[str, Any]) -> str:
    return event.get("rawPath") or event.get("path") or "/"


def _is_scheduled(event: dict[str, Any]) -> bool:
    return (
        event.get("source") == "aws.events"
        or _get_header(event, "X-Amz-Event-Source") == "aws:events"
        or _path(event).endswith("/scheduled")
    )


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    _configure_logging()
    start_ts = time.time()
    event = event or {}

    # Stage-prefixed paths (/prod/health) come through HTTP API events.
    if _path(event).endswith("/health"):
        return _response(200, {"result": "OK"})

    scheduled = _is_scheduled(event)
    # Anything that is not a scheduled trigger is a GroupMe callback.
    if not scheduled and _method(event) != "POST":
        _log("invalid_method", rid=_rid(context), method=_method(event))
        return _response(405, {"error": "method not allowed"})

    try:
        dispatcher = build_dispatcher(load_settings())
        if scheduled:
            result = dispatcher.handle_scheduled()
        else:
            result = dispatcher.handle_callback(_get_body(event))
    except BotError as e:
        status = http_status(e)
        _log(
            "scheduled_error" if scheduled else "callback_error",
            rid=_rid(context),
            kind=type(e).__name__,
            error=str(e),
            status=status,
        )
        return _response(status, {"error": str(e)})
    except Exception as e:
        logger.exception("Unhandled error")
        _log("internal_error", rid=_rid(context), error=str(e))
        return _response(500, {"error": "internal server error"})

    _log(
        "ok",
        rid=_rid(context),
        action=result.action,
        ms_total=int((time.time() - start_ts) * 1000),
    )
    if scheduled:
        return _response(200, {"result": "Weekly suggestion sent"})
    return _response(200, {"result": "OK", "action": result.action})
