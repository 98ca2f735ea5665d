"""Domain models for chat items and chats."""

from dataclasses import dataclass
from enum import Enum


class ChatType(Enum):
    """Kind of chat, with the prefix used in chat ids."""

    DIRECT = "@"
    GROUP = "#"
    LOCAL = "*"


class Area(Enum):
    """Logical scroll region a chat item belongs to."""

    BOTTOM = "bottom"
    CURRENT = "current"
    DESTINATION = "destination"


class LandingSection(Enum):
    """Where a chat is opened: at the latest item or at the first unread one."""

    LATEST = "latest"
    UNREAD = "unread"


@dataclass(frozen=True)
class ChatDirection:
    """Who sent an item. ``member_id`` is set for group chats only."""

    sent: bool
    member_id: str | None = None

    @classmethod
    def direct_sent(cls) -> "ChatDirection":
        return cls(sent=True)

    @classmethod
    def direct_received(cls) -> "ChatDirection":
        return cls(sent=False)

    @classmethod
    def group_sent(cls) -> "ChatDirection":
        return cls(sent=True)

    @classmethod
    def group_received(cls, member_id: str) -> "ChatDirection":
        return cls(sent=False, member_id=member_id)

    @property
    def is_group_received(self) -> bool:
        return not self.sent and self.member_id is not None


@dataclass(frozen=True)
class ChatItem:
    """A single chat item as seen by the sectioning code."""

    id: int
    direction: ChatDirection
    merge_category: str | None = None
    text: str = ""


@dataclass(frozen=True)
class ChatInfo:
    """Identity of a chat."""

    chat_type: ChatType
    api_id: int
    display_name: str = ""

    @property
    def id(self) -> str:
        return f"{self.chat_type.value}{self.api_id}"

    @classmethod
    def from_id(cls, chat_id: str) -> "ChatInfo":
        """Parse a prefixed chat id such as ``#12`` or ``@3``."""
        for chat_type in ChatType:
            prefix = chat_type.value
            if chat_id.startswith(prefix) and chat_id[len(prefix) :].isdigit():
                return cls(chat_type=chat_type, api_id=int(chat_id[len(prefix) :]))
        msg = f"bad chat id: {chat_id!r}"
        raise ValueError(msg)


@dataclass(frozen=True)
class ChatPage:
    """One page of chat items returned by the chat API."""

    chat_info: ChatInfo
    chat_items: tuple[ChatItem, ...] = ()


def landing_section_to_area(landing_section: LandingSection) -> Area:
    """Map the landing section a chat is opened at to the area it loads into."""
    if landing_section is LandingSection.LATEST:
        return Area.BOTTOM
    return Area.CURRENT
