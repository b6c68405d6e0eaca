"""Campus assistant answering questions with the live event list as context."""

import logging
from typing import Iterable, Sequence

import anthropic
from sqlalchemy.ext.asyncio import AsyncSession

from umission.api.events import service as event_service
from umission.api.events.models import Events
from umission.config import settings

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    "Error: APP_ANTHROPIC_API_KEY not found. Please configure your environment."
)
EMPTY_REPLY_MESSAGE = "I'm having trouble connecting to the campus network. Try again?"
OFFLINE_MESSAGE = "Sorry, I'm currently offline. Please check your connection."

SYSTEM_PROMPT = """You are "UMission AI", a campus assistant for Universiti Malaya (UM) students.
Your goal is to help students find volunteer opportunities on campus (Kolej Kediaman, Faculties, Rimba Ilmu, Tasik Varsiti, etc.).

Here is the live list of events currently happening at UM:
{event_context}

Rules:
1. Only recommend events from the list above if asked about "current" opportunities.
2. If asked about locations, assume they are within the UM Campus (e.g., "DTC" = Dewan Tunku Canselor).
3. Be encouraging and student-friendly. Use terms like "Siswa/Siswi" or "Campus Community".
4. If an organizer asks for help, suggest ideas relevant to university SDG goals (Green Campus, Zero Waste, Food Security)."""

_client: anthropic.AsyncAnthropic | None = None


def get_client() -> anthropic.AsyncAnthropic:
    global _client
    if _client is None:
        _client = anthropic.AsyncAnthropic(api_key=settings.ANTHROPIC_API_KEY)
    return _client


def build_event_context(events: Iterable[Events]) -> str:
    return "\n".join(
        f"- {e.title} ({e.date.isoformat()}) @ {e.location}. "
        f"Organized by {e.organizer_name}. ID: {e.id}"
        for e in events
    )


def build_messages(prompt: str, history: Sequence[dict]) -> list[dict]:
    messages = [
        {
            "role": "assistant" if turn["role"] == "model" else turn["role"],
            "content": turn["text"],
        }
        for turn in history
        if turn.get("text")
    ]
    messages.append({"role": "user", "content": prompt})
    return messages


async def generate_chat_response(
    prompt: str,
    history: Sequence[dict],
    events: Iterable[Events],
    client: anthropic.AsyncAnthropic | None = None,
) -> str:
    if not settings.ANTHROPIC_API_KEY and client is None:
        return MISSING_KEY_MESSAGE

    client = client or get_client()
    try:
        resp = await client.messages.create(
            model=settings.ASSISTANT_MODEL,
            max_tokens=settings.ASSISTANT_MAX_TOKENS,
            system=SYSTEM_PROMPT.format(event_context=build_event_context(events)),
            messages=build_messages(prompt, history),
        )
        text = "".join(
            block.text for block in resp.content if getattr(block, "type", None) == "text"
        )
        return text or EMPTY_REPLY_MESSAGE
    except Exception:
        logger.exception("Assistant API error")
        return OFFLINE_MESSAGE


async def chat(session: AsyncSession, prompt: str, history: Sequence[dict]) -> str:
    try:
        events = await event_service.list_events(session)
    except Exception:
        logger.exception("Could not load events for the assistant context")
        return OFFLINE_MESSAGE
    return await generate_chat_response(prompt, history, events)
