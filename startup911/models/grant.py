from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..platform.database import Base

grant_tags = Table(
    "grant_tags",
    Base.metadata,
    Column("grant_id", Integer, ForeignKey("grants.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True, index=True),
)


class Grant(Base):
    __tablename__ = "grants"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    organization = Column(String, nullable=True)
    details = Column(Text, nullable=True)
    status = Column(String, nullable=True)
    amount_max = Column(String, nullable=True)

    # Mandatory prerequisites (hard filter)
    dpiit_required = Column(Boolean, default=False)
    patent_required = Column(Boolean, default=False)
    prototype_required = Column(Boolean, default=False)
    technical_cofounder_required = Column(Boolean, default=False)
    full_time_commitment = Column(Boolean, default=False)

    # Descriptive flags
    tech_focus_required = Column(Boolean, default=False)
    women_led_focus = Column(Boolean, default=False)
    student_focus = Column(Boolean, default=False)
    mentorship_included = Column(Boolean, default=False)
    workspace_provided = Column(Boolean, default=False)
    network_access = Column(Boolean, default=False)

    application_deadline = Column(Date, nullable=True)
    application_link = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    tags = relationship("Tag", secondary=grant_tags)
