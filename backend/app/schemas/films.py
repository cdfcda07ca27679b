from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class FilmRequest(BaseModel):
    title: str = ""
    director: str = ""
    year: int = 0
    genre: Optional[str] = ""


class FilmDetail(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    director: str
    year: int
    genre: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
