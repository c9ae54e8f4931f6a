import enum

from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.sql import func

from ..platform.database import Base


class TagType(str, enum.Enum):
    STAGE = "STAGE"
    INDUSTRY = "INDUSTRY"
    REGION = "REGION"
    LOCATION = "LOCATION"
    REQUIREMENT = "REQUIREMENT"
    SOCIAL_IMPACT = "SOCIAL_IMPACT"
    SPECIAL_CATEGORY = "SPECIAL_CATEGORY"
    EXPERTISE = "EXPERTISE"
    CURRENCY = "CURRENCY"
    INVESTMENT_TYPE = "INVESTMENT_TYPE"


class Tag(Base):
    __tablename__ = "tags"
    __table_args__ = (
        UniqueConstraint("name", "type", name="uq_tags_name_type"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    # Legacy VC tags were imported without a type; they are bucketed by name.
    type = Column(String, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        return f"Tag(id={self.id!r}, name={self.name!r}, type={self.type!r})"
