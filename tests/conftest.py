"""Test configuration and fixtures."""
import json

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.chat_session import ChatSession
from app.services.rooms import RoomRegistry


class FakeConnection:
    """Send capability that records what it is given, or fails on demand."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []

    async def __call__(self, data: str) -> None:
        if self.fail:
            raise ConnectionError("socket gone")
        self.sent.append(data)

    @property
    def messages(self):
        return [json.loads(d) for d in self.sent]


async def no_joke() -> str:
    raise AssertionError("joke fetcher should not be called")


def make_session(rooms, room_name="lobby", fail=False, joke_fetcher=no_joke):
    conn = FakeConnection(fail=fail)
    return ChatSession(send=conn, room_name=room_name, rooms=rooms, joke_fetcher=joke_fetcher), conn


@pytest.fixture
def rooms():
    return RoomRegistry()


@pytest.fixture
def client():
    app.state.rooms = RoomRegistry()
    with TestClient(app) as c:
        yield c
