from types import SimpleNamespace

import pytest

from umission.api.assistant import service


class FakeMessages:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return SimpleNamespace(content=self.reply)


def fake_client(reply=None, error=None):
    return SimpleNamespace(messages=FakeMessages(reply=reply, error=error))


def text_block(text):
    return SimpleNamespace(type="text", text=text)


@pytest.mark.asyncio
async def test_missing_key_short_circuits():
    reply = await service.generate_chat_response("Any events today?", [], [])

    assert reply == service.MISSING_KEY_MESSAGE


@pytest.mark.asyncio
async def test_reply_uses_event_context_and_history(db_session, make_event):
    event = await make_event(title="Tree Planting at Rimba Ilmu", location="Rimba Ilmu")
    client = fake_client(reply=[text_block("Try the "), text_block("Tree Planting event!")])
    history = [
        {"role": "user", "text": "Hi"},
        {"role": "model", "text": "Hello Siswa!"},
        {"role": "user", "text": ""},
    ]

    reply = await service.generate_chat_response(
        "What can I join this week?", history, [event], client=client
    )

    assert reply == "Try the Tree Planting event!"
    (call,) = client.messages.calls
    assert "Tree Planting at Rimba Ilmu" in call["system"]
    assert f"ID: {event.id}" in call["system"]
    assert call["messages"] == [
        {"role": "user", "content": "Hi"},
        {"role": "assistant", "content": "Hello Siswa!"},
        {"role": "user", "content": "What can I join this week?"},
    ]


@pytest.mark.asyncio
async def test_empty_reply_falls_back():
    client = fake_client(reply=[SimpleNamespace(type="tool_use")])

    reply = await service.generate_chat_response("Hello", [], [], client=client)

    assert reply == service.EMPTY_REPLY_MESSAGE


@pytest.mark.asyncio
async def test_provider_failure_returns_offline_message():
    client = fake_client(error=RuntimeError("connection reset"))

    reply = await service.generate_chat_response("Hello", [], [], client=client)

    assert reply == service.OFFLINE_MESSAGE


def test_build_event_context_is_empty_without_events():
    assert service.build_event_context([]) == ""


@pytest.mark.asyncio
async def test_chat_falls_back_when_events_cannot_be_loaded(db_session, monkeypatch):
    async def broken_list_events(session):
        raise RuntimeError("database is down")

    monkeypatch.setattr(service.event_service, "list_events", broken_list_events)

    reply = await service.chat(db_session, "Any events today?", [])

    assert reply == service.OFFLINE_MESSAGE
