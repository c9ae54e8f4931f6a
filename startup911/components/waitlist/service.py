"""Waitlist sign-ups for features that have not launched yet."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...models.waitlist import WaitlistEntry

logger = logging.getLogger("startup911.waitlist")

DEFAULT_WAITLIST_SOURCE = "grant_snap_extension"


class WaitlistEntryExistsError(Exception):
    def __init__(self, email: str):
        super().__init__(f"{email} is already on the waitlist")
        self.email = email


def normalize_email(email: str) -> str:
    return email.strip().lower()


def add_to_waitlist(db: Session, email: str, source: Optional[str] = None) -> WaitlistEntry:
    """Store one sign-up; emails are unique case-insensitively."""
    normalized = normalize_email(email)
    existing = db.scalar(select(WaitlistEntry.id).where(WaitlistEntry.email == normalized))
    if existing is not None:
        raise WaitlistEntryExistsError(normalized)

    source = (source or "").strip() or DEFAULT_WAITLIST_SOURCE
    entry = WaitlistEntry(email=normalized, source=source)
    db.add(entry)
    try:
        db.commit()
    except IntegrityError as exc:
        # Lost a race with a concurrent sign-up for the same address
        db.rollback()
        raise WaitlistEntryExistsError(normalized) from exc
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to store waitlist sign-up source=%s", source)
        raise
    db.refresh(entry)
    logger.info("Waitlist sign-up id=%s source=%s", entry.id, entry.source)
    return entry
