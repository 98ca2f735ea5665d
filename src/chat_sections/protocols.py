"""Protocols for dependency injection in the section loader."""

from typing import Protocol, runtime_checkable

from chat_sections.models.chat import ChatPage, ChatType


@runtime_checkable
class ChatApiProtocol(Protocol):
    """Protocol for chat API clients."""

    def get_chat(
        self,
        chat_type: ChatType,
        api_id: int,
        *,
        remote_host_id: int | None = None,
    ) -> ChatPage | None:
        """Fetch the latest page of a chat, returning None on failure."""
        ...
