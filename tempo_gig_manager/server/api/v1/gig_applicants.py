"""
API endpoints for gig applications and the ranked booking sequence.

Bands apply to gigs; the venue then ranks up to five applicants. The gig is
offered to rank 1 first and moves down the list client-side, so the server
only stores the order.
"""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tempo_gig_manager.core.database import get_session
from tempo_gig_manager.core.database.entities import GigApplicant
from tempo_gig_manager.core.database.repositories import BandRepository, GigApplicantRepository, GigRepository
from tempo_gig_manager.core.logging_config import get_logger
from tempo_gig_manager.core.models.domain import MAX_RANKED_APPLICANTS
from tempo_gig_manager.core.models.io import (
    GigApplicantCreate,
    GigApplicantListResponse,
    GigApplicantRead,
    GigApplicantResponse,
    GigApplicantUpdate,
    GigRankingRequest,
    OkResponse,
)

logger = get_logger(__name__)

router = APIRouter(tags=["gig-applicants"])


@router.get(
    "",
    response_model=GigApplicantListResponse,
    summary="List Gig Applicants",
    description="List a gig's applicants: ranked ones by rank, then unranked ones by application time.",
    responses={
        200: {"description": "Applicants in booking order"},
        400: {"description": "gig_id missing"},
    },
)
async def list_applicants(
    gig_id: Optional[uuid.UUID] = None,
    session: AsyncSession = Depends(get_session),
) -> GigApplicantListResponse:
    """
    List applicants of a gig.

    - **gig_id**: Gig id (required).
    """
    if gig_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="gig_id parameter required")
    applicants = await GigApplicantRepository(session).list_by_gig(gig_id)
    return GigApplicantListResponse(applicants=[GigApplicantRead.model_validate(a) for a in applicants])


@router.post(
    "",
    response_model=GigApplicantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Apply to Gig",
    responses={
        201: {"description": "Application created"},
        404: {"description": "Gig or band not found"},
        409: {"description": "The band already applied to this gig"},
    },
)
async def apply_to_gig(
    payload: GigApplicantCreate, session: AsyncSession = Depends(get_session)
) -> GigApplicantResponse:
    """
    Apply a band to a gig.

    - **gig_id**, **band_id**: Required.
    - **band_name**: Defaults to the band's profile name.
    """
    if await GigRepository(session).get_by_id(payload.gig_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gig not found")
    band = await BandRepository(session).get_by_id(payload.band_id)
    if band is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Band not found")

    applicant = GigApplicant(gig_id=payload.gig_id, band_id=payload.band_id, band_name=payload.band_name or band.name)
    try:
        applicant = await GigApplicantRepository(session).create(applicant)
    except IntegrityError:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="This band has already applied to this gig"
        ) from None

    logger.info(f"Band {applicant.band_id} applied to gig {applicant.gig_id}")
    return GigApplicantResponse(applicant=GigApplicantRead.model_validate(applicant))


@router.patch(
    "",
    response_model=GigApplicantResponse,
    summary="Update Application",
    description="Update an application's status or rank. Omitted or null fields keep their current value.",
    responses={
        200: {"description": "Application updated"},
        400: {"description": "Application id missing"},
        404: {"description": "Application not found"},
    },
)
async def update_applicant(
    payload: GigApplicantUpdate, session: AsyncSession = Depends(get_session)
) -> GigApplicantResponse:
    """
    Update an application.

    - **id**: Application id (required).
    - **status**: pending, accepted or rejected.
    - **rank**: Position in the booking sequence, 1 to 5; must not be held by another applicant of the gig.
    """
    if payload.id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Applicant id required")
    repo = GigApplicantRepository(session)
    if payload.rank is not None:
        current = await repo.get_by_id(payload.id)
        if current is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Applicant not found")
        holder = await repo.get_by_rank(current.gig_id, payload.rank)
        if holder is not None and holder.id != current.id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Rank {payload.rank} is already held by another applicant",
            )
    applicant = await repo.apply_changes(payload.id, payload.model_dump(exclude={"id"}))
    if applicant is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Applicant not found")
    return GigApplicantResponse(applicant=GigApplicantRead.model_validate(applicant))


@router.delete(
    "",
    response_model=OkResponse,
    response_model_exclude_none=True,
    summary="Withdraw Application",
    responses={
        200: {"description": "Application removed"},
        400: {"description": "Application id missing"},
        404: {"description": "Application not found"},
    },
)
async def delete_applicant(
    applicant_id: Optional[uuid.UUID] = Query(default=None, alias="id"),
    session: AsyncSession = Depends(get_session),
) -> OkResponse:
    """Withdraw an application."""
    if applicant_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id parameter required")
    if not await GigApplicantRepository(session).delete(applicant_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Applicant not found")
    return OkResponse()


@router.post(
    "/ranking",
    response_model=GigApplicantListResponse,
    summary="Rank Applicants",
    description=(
        f"Store the venue's ranked shortlist of up to {MAX_RANKED_APPLICANTS} applicants. "
        "Applicants left out of the list become unranked."
    ),
    responses={
        200: {"description": "Applicants in the new booking order"},
        400: {"description": "Too many, duplicate or foreign applicant ids"},
    },
)
async def rank_applicants(
    payload: GigRankingRequest, session: AsyncSession = Depends(get_session)
) -> GigApplicantListResponse:
    """
    Replace the ranked booking sequence of a gig.

    - **gig_id**: Gig id.
    - **applicant_ids**: Applicant ids, best first.
    """
    ordered_ids = payload.applicant_ids
    if len(ordered_ids) > MAX_RANKED_APPLICANTS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"At most {MAX_RANKED_APPLICANTS} applicants can be ranked",
        )
    if len(set(ordered_ids)) != len(ordered_ids):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Duplicate applicant ids")

    repo = GigApplicantRepository(session)
    known_ids = {applicant.id for applicant in await repo.list_by_gig(payload.gig_id)}
    if not set(ordered_ids) <= known_ids:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Every ranked applicant must belong to the gig"
        )

    applicants = await repo.set_ranking(payload.gig_id, ordered_ids)
    logger.info(f"Ranked {len(ordered_ids)} applicants for gig {payload.gig_id}")
    return GigApplicantListResponse(applicants=[GigApplicantRead.model_validate(a) for a in applicants])
