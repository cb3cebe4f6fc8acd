from sqlalchemy import Column, String, Text, func
from sqlalchemy.types import JSON, DateTime

from quizhub.core.database import Base, utcnow
from quizhub.domain.identifiers import new_object_id


class Question(Base):
    __tablename__ = "questions"

    id = Column(String(24), primary_key=True, default=new_object_id)
    question = Column(Text, nullable=False)
    options = Column(JSON, nullable=False)
    correct_answer = Column(Text, nullable=False)
    # No foreign key: deleting a set leaves its questions in place
    set_id = Column(String(24), nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), index=True
    )
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow
    )
