from sqlalchemy import Column, Integer, String, DateTime as SADateTime
from sqlalchemy.sql import func

from app.database import Base


class Film(Base):
    __tablename__ = "films"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    director = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False)
    genre = Column(String(64), nullable=False, default="")
    created_at = Column(SADateTime, server_default=func.now(), nullable=False)
    updated_at = Column(SADateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
    deleted_at = Column(SADateTime, nullable=True, index=True)
