"""Chat API client fetching pages of chat items."""

import json
from typing import Any

import requests
from loguru import logger

from chat_sections.config import API_BASE_URL, API_TIMEOUT, PAGE_SIZE
from chat_sections.core.importer.json_reader import parse_chat_page
from chat_sections.models.chat import ChatPage, ChatType

_CHAT_TYPE_NAMES = {
    ChatType.DIRECT: "direct",
    ChatType.GROUP: "group",
    ChatType.LOCAL: "local",
}


class ChatApi:
    """HTTP client for the chat API server."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        page_size: int | None = None,
    ) -> None:
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self.timeout = API_TIMEOUT if timeout is None else timeout
        self.page_size = PAGE_SIZE if page_size is None else page_size
        self.sess = requests.Session()

        logger.debug("Chat API ready: {!r}, page size {}", self.base_url, self.page_size)

    def call(self, path: str, args: dict[str, Any]) -> dict[str, Any]:
        """Invoke a chat API endpoint, return json."""
        logger.debug("Making request: {!r} {}", path, repr(args)[:48])

        r = self.sess.post(
            f"{self.base_url}/{path}",
            data=json.dumps(args),
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        r.raise_for_status()
        rv = r.json()
        if not isinstance(rv, dict):
            msg = f"API call failed: ({path!r}, {args!r}) -> non-object body {type(rv).__name__}"
            raise RuntimeError(msg)
        if not rv.get("ok"):
            msg = f"API call failed: ({path!r}, {args!r}) -> {rv.get('error')!r}"
            raise RuntimeError(msg)
        return rv

    def get_chat(
        self,
        chat_type: ChatType,
        api_id: int,
        *,
        remote_host_id: int | None = None,
    ) -> ChatPage | None:
        """Fetch the latest page of a chat.

        Returns None on transport errors, API errors or malformed responses.
        """
        args: dict[str, Any] = {
            "type": _CHAT_TYPE_NAMES[chat_type],
            "id": api_id,
            "count": self.page_size,
        }
        if remote_host_id is not None:
            args["remoteHostId"] = remote_host_id

        try:
            return parse_chat_page(self.call("chat/get", args))
        except requests.RequestException as e:
            logger.warning("Chat request failed: {}", e)
        except (RuntimeError, ValueError) as e:
            logger.warning("Bad chat response for {}{}: {}", chat_type.value, api_id, e)
        return None
