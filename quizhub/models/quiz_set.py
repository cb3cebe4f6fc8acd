from sqlalchemy import Boolean, Column, String, false, func
from sqlalchemy.types import DateTime

from quizhub.core.database import Base, utcnow
from quizhub.domain.identifiers import new_object_id


class QuizSet(Base):
    __tablename__ = "sets"

    id = Column(String(24), primary_key=True, default=new_object_id)
    name = Column(String(200), nullable=False, unique=True, index=True)
    is_active = Column(
        Boolean, nullable=False, default=False, server_default=false(), index=True
    )
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), index=True
    )
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow
    )
