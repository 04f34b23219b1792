import asyncio

import pytest

from travelcraft.client import SessionState
from travelcraft.client.auth_manager import NETWORK_ERROR_MESSAGE
from travelcraft.client.session_manager import EXPIRED_NOTICE, IDLE_CEILING_SECONDS

LOGOUT = ("POST", "/auth/logout")
CLEANUP = ("POST", "/auth/cleanup-session")


@pytest.fixture
def signed_in_server(server, user_payload):
    server.reply("GET", "/auth/me", 200, {"user": user_payload})
    server.reply(
        "POST", "/auth/signin", 200, {"message": "Sign In successful", "user": user_payload}
    )
    return server


@pytest.mark.asyncio
async def test_initialize_restores_user(auth_manager, signed_in_server):
    user = await auth_manager.initialize()

    assert user.email == "a@b.com"
    assert auth_manager.state == SessionState.authenticated
    assert auth_manager.is_authenticated
    assert auth_manager.initialized


@pytest.mark.asyncio
async def test_initialize_anonymous(auth_manager, server):
    server.reply("GET", "/auth/me", 401, {"error": {"code": "NO_SESSION", "message": "Not authenticated"}})

    assert await auth_manager.initialize() is None
    assert auth_manager.state == SessionState.anonymous
    assert not auth_manager.transient_error


@pytest.mark.asyncio
async def test_initialize_network_failure_is_transient(auth_manager, server):
    server.reply("GET", "/auth/me", offline=True)

    assert await auth_manager.initialize() is None
    assert auth_manager.transient_error
    assert auth_manager.initialized
    assert auth_manager.state == SessionState.unknown


@pytest.mark.asyncio
async def test_signin_success(auth_manager, signed_in_server):
    result = await auth_manager.signin("a@b.com", "correct")

    assert result.success
    assert result.user.name == "Ana Traveller"
    assert auth_manager.is_authenticated
    assert auth_manager.auth_error is None


@pytest.mark.asyncio
async def test_signin_failure_uses_server_message(auth_manager, server):
    server.reply(
        "POST",
        "/auth/signin",
        400,
        {"error": {"code": "INVALID_CREDENTIALS", "message": "Invalid credentials (password)"}},
    )

    result = await auth_manager.signin("a@b.com", "wrong")

    assert not result.success
    assert result.message == "Invalid credentials (password)"
    assert auth_manager.auth_error == "Invalid credentials (password)"
    assert auth_manager.state == SessionState.unknown


@pytest.mark.asyncio
async def test_signin_network_error(auth_manager, server):
    server.reply("POST", "/auth/signin", offline=True)

    result = await auth_manager.signin("a@b.com", "correct")

    assert result.message == NETWORK_ERROR_MESSAGE
    assert not auth_manager.is_authenticated


@pytest.mark.asyncio
async def test_signup_checks_fields_locally(auth_manager, server):
    result = await auth_manager.signup("", "a@b.com", "")

    assert not result.success
    assert result.message == "Missing required fields: password, name"
    assert server.requests == []


@pytest.mark.asyncio
async def test_double_logout_sends_one_request(auth_manager, signed_in_server):
    await auth_manager.signin("a@b.com", "correct")

    first, second = await asyncio.gather(auth_manager.logout(), auth_manager.logout())

    assert first.success and second.success
    assert signed_in_server.count(*LOGOUT) == 1
    assert signed_in_server.count(*CLEANUP) == 0
    assert auth_manager.user is None
    assert auth_manager.state == SessionState.anonymous


@pytest.mark.asyncio
async def test_logout_clears_local_state_when_server_fails(auth_manager, signed_in_server):
    await auth_manager.signin("a@b.com", "correct")
    signed_in_server.reply("POST", "/auth/logout", offline=True)

    result = await auth_manager.logout()

    assert not result.success
    assert result.message == "Logout failed, but local session cleared"
    assert auth_manager.user is None
    assert not auth_manager.session.heartbeat_running


@pytest.mark.asyncio
async def test_idle_expiry_clears_user_and_reports(auth_manager, signed_in_server, clock):
    await auth_manager.signin("a@b.com", "correct")
    clock.advance(IDLE_CEILING_SECONDS + 1)

    await auth_manager.session.tick()

    assert auth_manager.user is None
    assert auth_manager.state == SessionState.expired
    assert auth_manager.auth_error == EXPIRED_NOTICE
    assert signed_in_server.count(*CLEANUP) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [500, 503])
async def test_initialize_server_error_is_transient(auth_manager, server, status):
    server.reply(
        "GET", "/auth/me", status, {"error": {"code": "STORE_UNAVAILABLE", "message": "Internal server error"}}
    )

    assert await auth_manager.initialize() is None
    assert auth_manager.transient_error
    assert auth_manager.state == SessionState.unknown


@pytest.mark.asyncio
async def test_logout_after_cancelled_caller_sends_new_request(auth_manager, signed_in_server):
    await auth_manager.initialize()
    gate = asyncio.Event()
    signed_in_server.reply("POST", "/auth/logout", 200, {"message": "Logged out successfully"}, gate=gate)

    caller = asyncio.create_task(auth_manager.logout())
    while signed_in_server.count(*LOGOUT) < 1:
        await asyncio.sleep(0)
    caller.cancel()
    with pytest.raises(asyncio.CancelledError):
        await caller

    gate.set()
    while auth_manager.state != SessionState.anonymous:
        await asyncio.sleep(0)
    assert auth_manager.user is None

    await auth_manager.signin("a@b.com", "correct")
    assert auth_manager.state == SessionState.authenticated

    result = await auth_manager.logout()

    assert result.success
    assert signed_in_server.count(*LOGOUT) == 2
    assert auth_manager.state == SessionState.anonymous
    assert not auth_manager.session.heartbeat_running
