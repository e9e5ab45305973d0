"""
Minimal GroupMe bot-post client using stdlib urllib.
"""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request
from collections.abc import Callable
from dataclasses import dataclass

from .config import BOT_POST_URL
from .errors import EncodingError, MissingCredential, TransportError, UnexpectedStatus

logger = logging.getLogger(__name__)

OK_STATUSES = (200, 202)


@dataclass(frozen=True)
class OutboundMessage:
    group_id: str
    text: str


class GroupMeClient:
    def __init__(
        self,
        bot_id: str | Callable[[], str],
        api_url: str = BOT_POST_URL,
        timeout: float = 8,
        test_mode: bool = False,
    ) -> None:
        self._bot_id = bot_id
        self.api_url = api_url
        self.timeout = timeout
        self.test_mode = test_mode

    @property
    def bot_id(self) -> str:
        # A callable is resolved on first use and the result kept.
        if callable(self._bot_id):
            self._bot_id = self._bot_id() or ""
        return self._bot_id

    # ----- Helpers -----
    def _encode(self, text: str) -> bytes:
        try:
            return json.dumps({"bot_id": self.bot_id, "text": text}).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingError(f"error marshaling payload: {e}") from e

    def _post_json(self, body: bytes) -> int:
        req = urllib.request.Request(
            self.api_url,
            data=body,
            method="POST",
            headers={
                "User-Agent": "GroupMeBot/1.0",
                "Content-Type": "application/json",
            },
        )
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:  # nosec B310
                return resp.status
        except urllib.error.HTTPError as e:
            # urllib raises for 4xx/5xx; report it as a status, not a transport failure
            e.close()
            return e.code
        except (OSError, http.client.HTTPException) as e:
            raise TransportError(f"error sending request: {e}") from e

    # ----- Public APIs -----
    def send(self, group_id: str, text: str) -> None:
        """Post `text` as the bot. The group is implied by the bot id."""
        if not self.bot_id:
            raise MissingCredential("GROUPME_BOT_ID not set")
        body = self._encode(text)
        if self.test_mode:
            logger.info("Test mode: would send to GroupMe group %s: %s", group_id, text)
            return
        status = self._post_json(body)
        if status not in OK_STATUSES:
            raise UnexpectedStatus(status)
        logger.info("Successfully sent message to GroupMe group %s: %s", group_id, text)

    def send_message(self, message: OutboundMessage) -> None:
        self.send(message.group_id, message.text)
