"""
API endpoints for marketplace user accounts.

Accounts are looked up by id or email, created with a role, and carry the
onboarding flags (two-factor, face verification, profile completion) that the
client updates as the user progresses.
"""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tempo_gig_manager.core.database import get_session
from tempo_gig_manager.core.database.entities import User
from tempo_gig_manager.core.database.repositories import UserRepository
from tempo_gig_manager.core.logging_config import get_logger
from tempo_gig_manager.core.models.domain import UserRole
from tempo_gig_manager.core.models.io import UserCreate, UserRead, UserResponse, UserUpdate
from tempo_gig_manager.core.security import hash_password

logger = get_logger(__name__)

router = APIRouter(tags=["users"])

_VALID_ROLES = {role.value for role in UserRole}


@router.get(
    "",
    response_model=UserResponse,
    summary="Get User",
    description="Retrieve a user account by id or by email address.",
    responses={
        200: {"description": "User found"},
        400: {"description": "Neither id nor email given"},
        404: {"description": "User not found"},
    },
)
async def get_user(
    user_id: Optional[uuid.UUID] = Query(default=None, alias="id"),
    email: Optional[str] = None,
    session: AsyncSession = Depends(get_session),
) -> UserResponse:
    """
    Get a user account.

    - **id**: Account id (takes precedence over email).
    - **email**: Exact login email.
    """
    repo = UserRepository(session)
    if user_id is not None:
        user = await repo.get_by_id(user_id)
    elif email:
        user = await repo.get_by_email(email)
    else:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id or email parameter required")

    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse(user=UserRead.model_validate(user))


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    description="Register a new venue, artist or band account. The password is stored hashed.",
    responses={
        201: {"description": "User created"},
        400: {"description": "Invalid role or no contact given"},
        409: {"description": "Email or phone already registered"},
    },
)
async def create_user(payload: UserCreate, session: AsyncSession = Depends(get_session)) -> UserResponse:
    """
    Create a user account.

    - **role**: One of venue, artist, band.
    - **email** / **phone**: At least one is required; each must be unique.
    - **password**: Optional; only its hash is stored.
    """
    if payload.role not in _VALID_ROLES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Valid role required (venue, artist, band)"
        )
    if not payload.email and not payload.phone:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email or phone required")

    user = User(
        email=payload.email or None,
        phone=payload.phone or None,
        password_hash=hash_password(payload.password) if payload.password else None,
        role=payload.role,
    )
    try:
        user = await UserRepository(session).create(user)
    except IntegrityError:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="An account with this email already exists"
        ) from None

    logger.info(f"Created {user.role} account {user.id}")
    return UserResponse(user=UserRead.model_validate(user))


@router.patch(
    "",
    response_model=UserResponse,
    summary="Update User Flags",
    description="Update onboarding flags of an account. Omitted or null fields keep their current value.",
    responses={
        200: {"description": "User updated"},
        400: {"description": "User id missing"},
        404: {"description": "User not found"},
    },
)
async def update_user(payload: UserUpdate, session: AsyncSession = Depends(get_session)) -> UserResponse:
    """
    Update account flags.

    - **id**: Account id (required).
    - **two_factor_enabled**, **face_verified**, **profile_completed**: New flag values.
    """
    if payload.id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User id required")

    changes = payload.model_dump(exclude={"id"})
    user = await UserRepository(session).apply_changes(payload.id, changes)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse(user=UserRead.model_validate(user))
