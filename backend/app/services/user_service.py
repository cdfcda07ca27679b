import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_USERS = [
    ("admin", "admin123"),
    ("user1", "password123"),
    ("demo", "demo456"),
]


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, username: str, password: str) -> User:
    if get_user_by_username(db, username):
        raise ValueError("Username already exists")

    user = User(username=username, password=password)

    db.add(user)
    db.commit()
    db.refresh(user)

    return user


def seed_users(db: Session) -> int:
    """Create the default users that do not exist yet; returns how many were added"""
    created = 0
    for username, password in DEFAULT_USERS:
        if get_user_by_username(db, username) is None:
            create_user(db, username, password)
            created += 1

    if created:
        logger.info("Seeded %d users", created)
    return created
