"""Configuration constants for chat-sections."""

import os

# Items a section may span before the oldest ones are evicted.
MAX_SECTION_SIZE: int = 500

# Chat API server. Override with CHAT_SECTIONS_API_URL.
API_BASE_URL: str = os.environ.get("CHAT_SECTIONS_API_URL", "http://localhost:5225")

# Seconds to wait for the chat API before giving up on a page.
API_TIMEOUT: float = float(os.environ.get("CHAT_SECTIONS_API_TIMEOUT", "10"))

# Items requested per page.
PAGE_SIZE: int = int(os.environ.get("CHAT_SECTIONS_PAGE_SIZE", "50"))
