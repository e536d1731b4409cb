"""HTTP routes for the accounts bounded context.

Provides the signup and login endpoints used by the dashboard. Routes
translate AccountError subclasses into status codes; no store error text
is ever echoed to the client.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from accounts.application.services import AccountService
from accounts.dependencies import get_account_service
from accounts.ports.exceptions import DuplicateUsernameError, InvalidCredentialsError
from accounts.presentation.models import (
    LoginRequest,
    LoginResponse,
    RegisteredUserResponse,
    SignupRequest,
    SignupResponse,
    UserResponse,
)

router = APIRouter(
    prefix="/api",
    tags=["accounts"],
)


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    service: Annotated[AccountService, Depends(get_account_service)],
) -> SignupResponse:
    """Create a new account.

    Args:
        request: Username, display name, and password
        service: Account service

    Returns:
        SignupResponse with the created user's public fields

    Raises:
        HTTPException: 409 if the username is already taken
        HTTPException: 500 if the credential store fails
    """
    try:
        user = await service.register_account(
            username=request.username,
            display_name=request.display_name,
            password=request.password,
        )
    except DuplicateUsernameError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already exists",
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error creating user",
        ) from e

    return SignupResponse(
        message="User created successfully",
        user=RegisteredUserResponse.from_domain(user),
    )


@router.post("/login")
async def login(
    request: LoginRequest,
    service: Annotated[AccountService, Depends(get_account_service)],
) -> LoginResponse:
    """Verify a username and password.

    Unknown usernames and wrong passwords produce the identical 401.

    Args:
        request: Username and password
        service: Account service

    Returns:
        LoginResponse with the user's public fields

    Raises:
        HTTPException: 401 if the credentials do not verify
        HTTPException: 500 if the credential store fails
    """
    try:
        user = await service.verify_credentials(
            username=request.username,
            password=request.password,
        )
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error logging in",
        ) from e

    return LoginResponse(message="Login successful", user=UserResponse.from_domain(user))
