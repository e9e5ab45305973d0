"""
Inbound callback and scheduled-suggestion orchestration.

Stateless per call: parse -> classify -> select -> deliver.
"""

from __future__ import annotations

import functools
import json
import logging
from dataclasses import dataclass, field
from typing import Any

from .classifier import is_question
from .config import Settings
from .credentials import resolve_bot_id
from .errors import MalformedPayload, MissingDestination
from .groupme import GroupMeClient, OutboundMessage
from .replies import parking_reply, select_question_reply, select_weekly_suggestion

logger = logging.getLogger(__name__)

_STR_FIELDS = (
    "name",
    "text",
    "user_id",
    "group_id",
    "avatar_url",
    "id",
    "sender_type",
    "source_guid",
    "sender_id",
)


@dataclass(frozen=True)
class InboundMessage:
    name: str = ""
    text: str = ""
    user_id: str = ""
    group_id: str = ""
    avatar_url: str = ""
    id: str = ""
    sender_type: str = ""
    source_guid: str = ""
    system: bool = False
    created_at: int = 0
    sender_id: str = ""
    attachments: tuple[Any, ...] = field(default_factory=tuple)

    @classmethod
    def from_payload(cls, payload: Any) -> InboundMessage:
        if not isinstance(payload, dict):
            raise MalformedPayload("callback body must be a JSON object")
        values: dict[str, Any] = {}
        for name in _STR_FIELDS:
            v = payload.get(name)
            if v is None:
                continue
            if not isinstance(v, str):
                raise MalformedPayload(f"field {name!r} must be a string")
            values[name] = v
        system = payload.get("system")
        if system is not None:
            if not isinstance(system, bool):
                raise MalformedPayload("field 'system' must be a boolean")
            values["system"] = system
        created_at = payload.get("created_at")
        if created_at is not None:
            if isinstance(created_at, bool) or not isinstance(created_at, int):
                raise MalformedPayload("field 'created_at' must be an integer")
            values["created_at"] = created_at
        attachments = payload.get("attachments")
        if attachments is not None:
            if not isinstance(attachments, list):
                raise MalformedPayload("field 'attachments' must be a list")
            values["attachments"] = tuple(attachments)
        return cls(**values)

    @property
    def from_bot(self) -> bool:
        return self.sender_type == "bot"


@dataclass(frozen=True)
class DispatchResult:
    action: str
    reply: str = ""


def parse_callback(body: str | bytes | dict[str, Any] | None) -> InboundMessage:
    if isinstance(body, dict):
        return InboundMessage.from_payload(body)
    if isinstance(body, (bytes, bytearray)):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedPayload(f"callback body is not UTF-8: {e}") from e
    try:
        payload = json.loads(body or "")
    except ValueError as e:
        raise MalformedPayload(f"error parsing callback: {e}") from e
    return InboundMessage.from_payload(payload)


class CallbackDispatcher:
    def __init__(self, client: GroupMeClient, default_group_id: str | None = None) -> None:
        self.client = client
        self.default_group_id = default_group_id

    def handle_callback(self, body: str | bytes | dict[str, Any] | None) -> DispatchResult:
        msg = parse_callback(body)
        if msg.from_bot:
            logger.debug("Ignoring bot message id=%s", msg.id)
            return DispatchResult("ignored_bot")

        logger.info("Processing message from %s: %s", msg.name, msg.text)
        if is_question(msg.text):
            reply = select_question_reply(msg.text, msg.name)
        else:
            # Parking requests are answered even without a question word.
            reply = parking_reply(msg.text)
            if not reply:
                return DispatchResult("ignored_not_question")
        if not reply:
            return DispatchResult("no_reply")
        self.client.send_message(OutboundMessage(msg.group_id, reply))
        return DispatchResult("replied", reply)

    def handle_scheduled(self) -> DispatchResult:
        if not self.default_group_id:
            raise MissingDestination("GROUPME_GROUP_ID not set")
        suggestion = select_weekly_suggestion()
        self.client.send_message(OutboundMessage(self.default_group_id, suggestion))
        logger.info("Weekly suggestion sent successfully")
        return DispatchResult("suggested", suggestion)


def build_dispatcher(settings: Settings) -> CallbackDispatcher:
    client = GroupMeClient(
        functools.partial(resolve_bot_id, settings),
        api_url=settings.api_url,
        timeout=settings.timeout_seconds,
        test_mode=settings.test_mode,
    )
    return CallbackDispatcher(client, settings.group_id)
