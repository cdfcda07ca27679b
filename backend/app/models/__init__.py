from app.models.film import Film
from app.models.user import User

__all__ = ["Film", "User"]
