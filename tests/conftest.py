from collections import defaultdict

import pytest
from fastapi.testclient import TestClient

from gamebuddy.core.dependencies import get_current_user, get_user_supabase
from gamebuddy.database.supabase_client import get_supabase

USER_ID = "11111111-1111-4111-8111-111111111111"
OTHER_ID = "22222222-2222-4222-8222-222222222222"


class FakeResponse:
    def __init__(self, data=None, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    """Chainable query stub: records every builder call, answers execute() from the client's queue."""

    def __init__(self, client, key):
        self.client = client
        self.key = key
        self.calls = []

    def __getattr__(self, name):
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self
        return method

    def execute(self):
        self.client.executed.append((self.key, self.calls))
        queue = self.client.responses[self.key]
        if queue:
            response = queue.pop(0)
            if isinstance(response, Exception):
                raise response
            return response
        return FakeResponse([], 0)


class FakeSupabase:
    def __init__(self):
        self.responses = defaultdict(list)
        self.executed = []
        self.rpc_calls = []

    def queue(self, key, data=None, count=None, error=None):
        """Queue the next result for a table name or "rpc:<function>"."""
        self.responses[key].append(error if error is not None else FakeResponse(data, count))
        return self

    def table(self, name):
        return FakeQuery(self, name)

    def rpc(self, fn, params=None):
        self.rpc_calls.append((fn, params))
        return FakeQuery(self, f"rpc:{fn}")

    def executed_keys(self):
        return [key for key, _ in self.executed]

    def calls_for(self, key):
        return [calls for k, calls in self.executed if k == key]


def call_args(calls, name):
    """Positional args of every builder call with the given name"""
    return [args for call_name, args, _ in calls if call_name == name]


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def current_user():
    return {
        "id": USER_ID,
        "email": "player@example.com",
        "user_metadata": {},
        "app_metadata": {},
    }


@pytest.fixture
def client(fake_supabase, current_user):
    from gamebuddy.main import app

    app.dependency_overrides[get_current_user] = lambda: current_user
    app.dependency_overrides[get_user_supabase] = lambda: fake_supabase
    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
