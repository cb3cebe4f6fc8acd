from sqlalchemy import Column, String, func
from sqlalchemy.types import DateTime

from quizhub.core.database import Base, utcnow
from quizhub.domain.identifiers import new_object_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=new_object_id)
    name = Column(String(200), nullable=False)
    email = Column(String(320), nullable=False, unique=True, index=True)
    joined_on = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False, index=True
    )
