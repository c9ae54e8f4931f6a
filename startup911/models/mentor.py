import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..platform.database import Base

mentor_tags = Table(
    "mentor_tags",
    Base.metadata,
    Column("mentor_id", String(36), ForeignKey("mentors.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True, index=True),
)


def _new_mentor_id() -> str:
    return str(uuid.uuid4())


class Mentor(Base):
    __tablename__ = "mentors"

    id = Column(String(36), primary_key=True, default=_new_mentor_id)
    name = Column(String, nullable=False)
    photo_url = Column(String, nullable=True)
    superpower = Column(String, nullable=True)
    about = Column(Text, nullable=True)
    languages = Column(JSON, nullable=True)
    rate_tier = Column(String, nullable=True)
    linkedin_url = Column(String, nullable=True)
    calendly_url = Column(String, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    tags = relationship("Tag", secondary=mentor_tags)
