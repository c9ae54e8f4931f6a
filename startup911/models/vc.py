from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..platform.database import Base

vc_tags = Table(
    "vc_tags",
    Base.metadata,
    Column("vc_id", Integer, ForeignKey("vcs.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True, index=True),
)


class VC(Base):
    __tablename__ = "vcs"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    website = Column(String, nullable=True)
    linkedin = Column(String, nullable=True)
    country_based_of = Column(String, nullable=True, index=True)
    about = Column(Text, nullable=True)
    key_person = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    tags = relationship("Tag", secondary=vc_tags)
