from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, EmailStr, Field

from travelcraft.api.error import ClientError, ServerError
from travelcraft.app.services.session_context import SessionContext
from travelcraft.app.services.unit_of_work import UnitOfWork
from travelcraft.app.use_cases.auth import (
    AuthResponse,
    CurrentUserResponse,
    HeartbeatResponse,
    LogoutUseCase,
    MessageResponse,
    SigninCommand,
    SigninUseCase,
    SignupCommand,
    SignupUseCase,
    UserInfo,
)
from travelcraft.depends import (
    CurrentUser,
    get_current_user,
    get_session_context,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def signup(
    request: SignupRequest,
    session: SessionContext = Depends(get_session_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Signup

    Creates the account and signs the caller's session in.

    Raises:
        - 400 Bad Request: Email already registered
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(
        name=request.name, email=request.email, password=request.password
    )

    use_case = SignupUseCase(uow)
    result = await use_case.execute(command, session)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class SigninRequest(BaseModel):
    """Plain string email: a malformed address is just another failed sign-in"""

    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/signin", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def signin(
    request: SigninRequest,
    session: SessionContext = Depends(get_session_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Signin

    Verifies credentials and moves the session from anonymous to
    authenticated.

    Raises:
        - 400 Bad Request: Invalid credentials (session stays anonymous)
        - 500 Internal Server Error: Server error
    """
    use_case = SigninUseCase(uow)
    result = await use_case.execute(
        SigninCommand(email=request.email, password=request.password), session
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(
    session: SessionContext = Depends(get_session_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Logout

    Deletes the session record and clears the session cookie.
    """
    result = await LogoutUseCase(uow).execute(session)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=CurrentUserResponse)
async def me(current_user: CurrentUser = Depends(get_current_user)):
    """
    Who am I

    Raises:
        - 401 Unauthorized: NO_SESSION or INVALID_SESSION
    """
    return CurrentUserResponse(
        user=UserInfo(
            id=str(current_user.id), name=current_user.name, email=current_user.email
        )
    )


@router.get(
    "/heartbeat",
    status_code=status.HTTP_200_OK,
    response_model=HeartbeatResponse,
    responses={401: {"model": HeartbeatResponse}},
)
async def heartbeat(session: SessionContext = Depends(get_session_context)):
    """
    Session liveness probe.

    Read-only: the rolling touch is done by the session middleware. An
    anonymous session answers 401 with authenticated=false, never an error.
    """
    if not session.is_authenticated:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"authenticated": False},
        )
    return HeartbeatResponse(authenticated=True)


@router.post("/cleanup-session", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def cleanup_session(
    session: SessionContext = Depends(get_session_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Best-effort destroy sent by clients on idle timeout or page unload.

    Idempotent: destroying an already-destroyed session still succeeds.
    """
    result = await LogoutUseCase(uow).execute(session, message="Session cleaned up")
    if result.is_err():
        raise ServerError(result.error)
    return result.value
