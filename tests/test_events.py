import asyncio
import threading
from datetime import datetime, timezone

from gamebuddy.config import settings
from gamebuddy.modules.events.schemas import EventsResponse
from gamebuddy.modules.events.service import EventService, parse_timestamp
from tests.conftest import USER_ID, OTHER_ID, call_args

SINCE = "2024-05-01T10:00:00+00:00"


def _ts(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_parse_timestamp_variants():
    assert parse_timestamp("2024-05-01T10:00:00Z") == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)
    assert parse_timestamp("2024-05-01T10:00:00") == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)
    assert parse_timestamp(None) is None


def test_first_poll_only_returns_cursor(client, fake_supabase):
    response = client.get("/api/v1/events")

    assert response.status_code == 200
    body = response.json()
    assert body["new_messages"] == []
    assert body["cursor"]
    assert fake_supabase.executed == []


def test_poll_reports_messages_activity_and_new_matches(client, fake_supabase):
    fake_supabase.queue("conversations", [
        {
            "id": "c1", "user1_id": USER_ID, "user2_id": OTHER_ID,
            "created_at": "2024-04-01T08:00:00+00:00",
            "last_message_at": "2024-05-01T10:05:00+00:00",
        },
        {
            "id": "c2", "user1_id": "u3", "user2_id": USER_ID,
            "created_at": "2024-05-01T10:02:00+00:00",
            "last_message_at": "2024-05-01T10:02:00+00:00",
        },
        {
            "id": "c3", "user1_id": USER_ID, "user2_id": "u4",
            "created_at": "2024-03-01T08:00:00+00:00",
            "last_message_at": "2024-04-01T08:00:00+00:00",
        },
    ])
    fake_supabase.queue("messages", [
        {
            "id": "msg1", "conversation_id": "c1", "sender_id": OTHER_ID,
            "content": "Running late", "created_at": "2024-05-01T10:05:00+00:00",
        },
    ])

    response = client.get("/api/v1/events", params={"since": SINCE, "timeout": 0})

    assert response.status_code == 200
    body = response.json()
    assert [m["id"] for m in body["new_messages"]] == ["msg1"]
    assert [c["id"] for c in body["updated_conversations"]] == ["c1"]
    assert [c["id"] for c in body["new_conversations"]] == ["c2"]
    assert _ts(body["cursor"]) == _ts("2024-05-01T10:05:00+00:00")

    message_calls = fake_supabase.calls_for("messages")[0]
    assert call_args(message_calls, "in_") == [("conversation_id", ["c1", "c2", "c3"])]
    assert call_args(message_calls, "gt") == [("created_at", SINCE)]


def test_poll_without_conversations_keeps_cursor(client, fake_supabase):
    body = client.get("/api/v1/events", params={"since": SINCE, "timeout": 0}).json()

    assert body["new_messages"] == []
    assert body["new_conversations"] == []
    assert _ts(body["cursor"]) == _ts(SINCE)
    assert fake_supabase.executed_keys() == ["conversations"]


def test_timeout_is_bounded(client, fake_supabase):
    response = client.get("/api/v1/events", params={"since": SINCE, "timeout": 120})
    assert response.status_code == 422


def test_wait_for_events_polls_until_change(fake_supabase, monkeypatch):
    monkeypatch.setattr(settings, "event_poll_interval_seconds", 0.01)
    # First poll: nothing; second poll: a new mutual match
    fake_supabase.queue("conversations", [])
    fake_supabase.queue("conversations", [{
        "id": "c9", "user1_id": OTHER_ID, "user2_id": USER_ID,
        "created_at": "2024-05-01T10:01:00+00:00",
        "last_message_at": "2024-05-01T10:01:00+00:00",
    }])

    service = EventService(fake_supabase)
    events = asyncio.run(service.wait_for_events(USER_ID, _ts(SINCE), timeout=5))

    assert [c.id for c in events.new_conversations] == ["c9"]
    assert fake_supabase.executed_keys() == ["conversations", "conversations", "messages"]


def test_wait_for_events_gives_up_after_timeout(fake_supabase, monkeypatch):
    monkeypatch.setattr(settings, "event_poll_interval_seconds", 0.01)

    service = EventService(fake_supabase)
    events = asyncio.run(service.wait_for_events(USER_ID, _ts(SINCE), timeout=0.05))

    assert not events.has_events
    assert events.cursor == _ts(SINCE)
    assert len(fake_supabase.executed) >= 2


def test_cursor_ignores_later_last_message_at(fake_supabase):
    conversation = {
        "id": "c1", "user1_id": USER_ID, "user2_id": OTHER_ID,
        "created_at": "2024-04-01T08:00:00+00:00",
        # Written after the message row, a moment later than its created_at
        "last_message_at": "2024-05-01T10:05:01+00:00",
    }
    fake_supabase.queue("conversations", [conversation])
    fake_supabase.queue("messages", [{
        "id": "msg1", "conversation_id": "c1", "sender_id": OTHER_ID,
        "content": "On my way", "created_at": "2024-05-01T10:05:00+00:00",
    }])
    fake_supabase.queue("conversations", [conversation])
    fake_supabase.queue("messages", [{
        "id": "msg2", "conversation_id": "c1", "sender_id": OTHER_ID,
        "content": "Parking now", "created_at": "2024-05-01T10:05:00.500000+00:00",
    }])
    service = EventService(fake_supabase)

    first = service.poll(USER_ID, _ts(SINCE))
    second = service.poll(USER_ID, first.cursor)

    assert first.cursor == _ts("2024-05-01T10:05:00+00:00")
    assert [m.id for m in second.new_messages] == ["msg2"]
    second_query = fake_supabase.calls_for("messages")[1]
    assert call_args(second_query, "gt") == [("created_at", "2024-05-01T10:05:00+00:00")]
    assert second.cursor == _ts("2024-05-01T10:05:00.500000+00:00")


def test_quiet_conversation_is_not_reported_again(fake_supabase):
    fake_supabase.queue("conversations", [{
        "id": "c1", "user1_id": USER_ID, "user2_id": OTHER_ID,
        "created_at": "2024-04-01T08:00:00+00:00",
        "last_message_at": "2024-05-01T10:05:01+00:00",
    }])
    service = EventService(fake_supabase)

    events = service.poll(USER_ID, _ts("2024-05-01T10:05:00+00:00"))

    assert not events.has_events
    assert events.cursor == _ts("2024-05-01T10:05:00+00:00")


def test_wait_for_events_polls_off_the_event_loop(fake_supabase, monkeypatch):
    service = EventService(fake_supabase)
    poll_threads = []

    def recording_poll(user_id, since):
        poll_threads.append(threading.get_ident())
        return EventsResponse(cursor=since)

    monkeypatch.setattr(service, "poll", recording_poll)

    async def run():
        loop_thread = threading.get_ident()
        await service.wait_for_events(USER_ID, _ts(SINCE), timeout=0)
        return loop_thread

    loop_thread = asyncio.run(run())

    assert len(poll_threads) == 1
    assert poll_threads[0] != loop_thread
