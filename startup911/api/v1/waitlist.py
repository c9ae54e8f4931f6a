from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...components.waitlist.service import WaitlistEntryExistsError, add_to_waitlist
from ...platform.database import get_db
from ...schemas.waitlist import (
    WaitlistEntryResponse,
    WaitlistJoinRequest,
    WaitlistJoinResponse,
    WaitlistStatusResponse,
)

router = APIRouter(prefix="/waitlist", tags=["Waitlist"])


def _parse_join_request(payload: Optional[dict]) -> WaitlistJoinRequest:
    email = (payload or {}).get("email")
    if not isinstance(email, str) or not email.strip():
        raise HTTPException(status_code=400, detail="Email is required")
    try:
        return WaitlistJoinRequest.model_validate({**payload, "email": email.strip()})
    except ValidationError as exc:
        if any(err["loc"] and err["loc"][0] == "email" for err in exc.errors()):
            raise HTTPException(status_code=400, detail="Please enter a valid email address")
        raise HTTPException(status_code=400, detail="Source must be a string of at most 100 characters")


@router.post("", response_model=WaitlistJoinResponse, status_code=status.HTTP_201_CREATED)
def join_waitlist(
    payload: Optional[dict] = Body(default=None),
    db: Session = Depends(get_db),
):
    data = _parse_join_request(payload)
    try:
        entry = add_to_waitlist(db, data.email, data.source)
    except WaitlistEntryExistsError:
        raise HTTPException(status_code=409, detail="This email is already on the waitlist")
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to add email to waitlist. Please try again.")
    return WaitlistJoinResponse(
        message="Successfully added to waitlist!",
        data=WaitlistEntryResponse.model_validate(entry),
    )


@router.get("", response_model=WaitlistStatusResponse)
def waitlist_status():
    return WaitlistStatusResponse(message="Waitlist API is working")
