"""End-to-end tests over the chat WebSocket route."""
import pytest
from starlette.websockets import WebSocketDisconnect

from app.main import app


def test_two_users_chat_in_lobby(client):
    with client.websocket_connect("/api/chat/lobby") as a:
        a.send_json({"type": "join", "name": "alice"})
        assert a.receive_json() == {"type": "note", "text": 'alice joined "lobby".'}

        with client.websocket_connect("/api/chat/lobby") as b:
            b.send_json({"type": "join", "name": "bob"})
            bob_joined = {"type": "note", "text": 'bob joined "lobby".'}
            assert a.receive_json() == bob_joined
            assert b.receive_json() == bob_joined

            a.send_json({"type": "chat", "text": "hello"})
            hello = {"type": "chat", "name": "alice", "text": "hello"}
            assert a.receive_json() == hello
            assert b.receive_json() == hello

        assert a.receive_json() == {"type": "note", "text": "bob left lobby."}

        a.send_json({"type": "chat", "text": "/members"})
        assert a.receive_json() == {"type": "chat", "name": "alice", "text": "In room: alice"}


def test_rooms_are_isolated(client):
    with client.websocket_connect("/api/chat/red") as red, client.websocket_connect("/api/chat/blue") as blue:
        red.send_json({"type": "join", "name": "rita"})
        assert red.receive_json() == {"type": "note", "text": 'rita joined "red".'}
        blue.send_json({"type": "join", "name": "bea"})
        assert blue.receive_json() == {"type": "note", "text": 'bea joined "blue".'}

        red.send_json({"type": "chat", "text": "only red"})
        assert red.receive_json()["text"] == "only red"

        blue.send_json({"type": "chat", "text": "/members"})
        assert blue.receive_json() == {"type": "chat", "name": "bea", "text": "In room: bea"}

    assert "red" in app.state.rooms
    assert "blue" in app.state.rooms


def test_unknown_type_closes_connection(client):
    with client.websocket_connect("/api/chat/lobby") as ws:
        ws.send_json({"type": "ping"})
        with pytest.raises(WebSocketDisconnect) as exc:
            ws.receive_text()
    assert exc.value.code == 1003


def test_malformed_payload_closes_connection(client):
    with client.websocket_connect("/api/chat/lobby") as ws:
        ws.send_text("this is not json")
        with pytest.raises(WebSocketDisconnect) as exc:
            ws.receive_text()
    assert exc.value.code == 1003


def test_health_counts_rooms(client):
    with client.websocket_connect("/api/chat/lobby"):
        pass
    assert client.get("/health").json() == {"ok": True, "rooms": 1}


def test_binary_frame_closes_connection(client):
    with client.websocket_connect("/api/chat/lobby") as a:
        a.send_json({"type": "join", "name": "alice"})
        assert a.receive_json() == {"type": "note", "text": 'alice joined "lobby".'}

        with client.websocket_connect("/api/chat/lobby") as b:
            b.send_json({"type": "join", "name": "bob"})
            assert a.receive_json() == {"type": "note", "text": 'bob joined "lobby".'}
            assert b.receive_json() == {"type": "note", "text": 'bob joined "lobby".'}

            b.send_bytes(b'{"type": "chat", "text": "hi"}')
            with pytest.raises(WebSocketDisconnect) as exc:
                b.receive_text()
            assert exc.value.code == 1003

        # the binary message never reached the room
        assert a.receive_json() == {"type": "note", "text": "bob left lobby."}
