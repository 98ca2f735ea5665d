"""Chat item sectioning for virtualized chat views."""

from chat_sections.api import ChatApi
from chat_sections.core.loader import load_bottom_section
from chat_sections.core.sections.area import ChatSectionLoader
from chat_sections.core.sections.builder import put_into_sections
from chat_sections.protocols import ChatApiProtocol
from chat_sections.session import ChatSession

__all__ = [
    "ChatApi",
    "ChatApiProtocol",
    "ChatSectionLoader",
    "ChatSession",
    "load_bottom_section",
    "put_into_sections",
]
