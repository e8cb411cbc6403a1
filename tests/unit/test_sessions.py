"""Tests for the session manager."""

import json

import pytest

from flutterexpo.streaming import SessionManager, SessionState


@pytest.mark.unit
def test_open_registers_session(connection_factory):
    manager = SessionManager()
    connection = connection_factory()

    session = manager.open(connection)

    assert session.session_id.startswith("sess_")
    assert session.state is SessionState.OPEN
    assert session.is_open
    assert manager.get(session.session_id) is session
    assert len(manager) == 1
    # Opening sends nothing
    assert connection.frames == []


@pytest.mark.unit
def test_session_ids_unique(connection_factory):
    manager = SessionManager()
    ids = {manager.open(connection_factory()).session_id for _ in range(50)}
    assert len(ids) == 50


@pytest.mark.unit
def test_close(connection_factory):
    manager = SessionManager()
    session = manager.open(connection_factory())

    manager.close(session.session_id)

    assert session.state is SessionState.CLOSED
    assert manager.get(session.session_id) is None
    assert len(manager) == 0
    # Closing twice is harmless
    manager.close(session.session_id)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_send_to(connection_factory):
    manager = SessionManager()
    first, second = connection_factory(), connection_factory()
    session = manager.open(first)
    manager.open(second)

    assert await manager.send_to(session.session_id, {"type": "PONG"}) is True
    assert first.messages == [{"type": "PONG"}]
    assert second.frames == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_send_to_unknown_session():
    assert await SessionManager().send_to("sess_missing", {"type": "PONG"}) is False


@pytest.mark.unit
@pytest.mark.asyncio
async def test_broadcast_identical_text(connection_factory):
    manager = SessionManager()
    connections = [connection_factory() for _ in range(3)]
    for connection in connections:
        manager.open(connection)

    delivered = await manager.broadcast({"type": "APP_CONFIG", "data": {"title": "é"}})

    assert delivered == 3
    frames = [connection.frames for connection in connections]
    assert frames[0] == frames[1] == frames[2]
    assert json.loads(frames[0][0])["data"]["title"] == "é"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_broadcast_skips_closed(connection_factory):
    manager = SessionManager()
    kept, dropped = connection_factory(), connection_factory()
    manager.open(kept)
    manager.close(manager.open(dropped).session_id)

    assert await manager.broadcast({"type": "X"}) == 1
    assert dropped.frames == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_failed_send_closes_session(connection_factory):
    manager = SessionManager()
    healthy = connection_factory()
    broken = connection_factory(fail=True)
    manager.open(healthy)
    broken_session = manager.open(broken)

    delivered = await manager.broadcast({"type": "X"})

    assert delivered == 1
    assert len(healthy.frames) == 1
    assert broken_session.state is SessionState.CLOSED
    assert manager.get(broken_session.session_id) is None
    assert broken.closed
    assert not healthy.closed


@pytest.mark.unit
@pytest.mark.asyncio
async def test_broadcast_with_no_sessions():
    assert await SessionManager().broadcast({"type": "X"}) == 0


@pytest.mark.unit
@pytest.mark.asyncio
async def test_failed_send_to_closes_transport(connection_factory):
    manager = SessionManager()
    broken = connection_factory(fail=True)
    session = manager.open(broken)

    assert await manager.send_to(session.session_id, {"type": "PONG"}) is False
    assert broken.closed
    assert len(manager) == 0


@pytest.mark.unit
def test_open_sessions(connection_factory):
    manager = SessionManager()
    first = manager.open(connection_factory())
    second = manager.open(connection_factory())
    manager.close(first.session_id)

    assert manager.open_sessions() == [second]
