# src/footprint_api/api/v1/endpoints/users.py
"""Identity registration endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from footprint_api.api.v1.dependencies import SessionDep
from footprint_api.schemas.user import AllocateRequest, AllocateResponse, NextSerialResponse
from footprint_api.services.serial_allocator import allocate, peek_next_serial

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=AllocateResponse)
async def create_user(payload: AllocateRequest, db: SessionDep) -> AllocateResponse:
    """Register an email, returning its serial.

    Repeated calls with the same email return the same serial with
    ``existed=true``. A new identity is created with its default page.
    """
    allocation = allocate(db, payload.email)
    return AllocateResponse(
        serial=allocation.serial,
        existed=allocation.existed,
        slug=allocation.footprint.slug if allocation.footprint else None,
    )


@router.get("/next-serial", response_model=NextSerialResponse, status_code=status.HTTP_200_OK)
async def next_serial(db: SessionDep) -> NextSerialResponse:
    """Report the serial the next registration would receive, without claiming it."""
    return NextSerialResponse(serial=peek_next_serial(db))
