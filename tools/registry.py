from __future__ import annotations

from tools.types import ToolRecord

# Simplified catalog; the full directory lives at aiindigo.com.
TOOLS: tuple[ToolRecord, ...] = (
    ToolRecord(
        id="1",
        name="ChatGPT",
        category="chatbots",
        description="OpenAI conversational AI",
        url="https://chat.openai.com",
    ),
    ToolRecord(
        id="2",
        name="Claude",
        category="chatbots",
        description="Anthropic thoughtful AI",
        url="https://claude.ai",
    ),
    ToolRecord(
        id="3",
        name="Midjourney",
        category="image",
        description="AI image generation",
        url="https://midjourney.com",
    ),
    ToolRecord(
        id="4",
        name="Cursor",
        category="coding",
        description="AI-powered code editor",
        url="https://cursor.sh",
    ),
    ToolRecord(
        id="5",
        name="v0",
        category="coding",
        description="AI UI generator by Vercel",
        url="https://v0.dev",
    ),
)

# Advisory only, not checked against TOOLS.
CATEGORIES: tuple[str, ...] = (
    "chatbots",
    "coding",
    "image",
    "video",
    "audio",
    "writing",
    "productivity",
)


def get_tools() -> tuple[ToolRecord, ...]:
    return TOOLS


def get_categories() -> list[str]:
    return list(CATEGORIES)
