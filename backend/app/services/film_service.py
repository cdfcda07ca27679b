import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.film import Film

logger = logging.getLogger(__name__)

SAMPLE_FILMS = [
    {"title": "The Shawshank Redemption", "director": "Frank Darabont", "year": 1994, "genre": "Drama"},
    {"title": "The Godfather", "director": "Francis Ford Coppola", "year": 1972, "genre": "Crime"},
    {"title": "The Dark Knight", "director": "Christopher Nolan", "year": 2008, "genre": "Action"},
    {"title": "Pulp Fiction", "director": "Quentin Tarantino", "year": 1994, "genre": "Crime"},
    {"title": "Forrest Gump", "director": "Robert Zemeckis", "year": 1994, "genre": "Drama"},
]


def _active_films(db: Session):
    return db.query(Film).filter(Film.deleted_at.is_(None))


def list_films(db: Session) -> List[Film]:
    return _active_films(db).order_by(Film.id).all()


def get_film_detail(db: Session, film_id: int) -> Optional[Film]:
    return _active_films(db).filter(Film.id == film_id).first()


def create_film(db: Session, title: str, director: str, year: int, genre: str = "") -> Film:
    film = Film(title=title, director=director, year=year, genre=genre or "")

    db.add(film)
    db.commit()
    db.refresh(film)

    return film


def update_film(db: Session, film_id: int, title: str, director: str, year: int, genre: str = "") -> Film:
    film = get_film_detail(db, film_id)
    if not film:
        raise ValueError("Film not found")

    film.title = title
    film.director = director
    film.year = year
    film.genre = genre or ""

    film.updated_at = datetime.now(timezone.utc).replace(tzinfo=None)
    db.commit()
    db.refresh(film)

    return film


def delete_film(db: Session, film_id: int) -> None:
    """Soft delete: the row stays but is hidden from every query"""
    film = get_film_detail(db, film_id)
    if not film:
        raise ValueError("Film not found")

    film.deleted_at = datetime.now(timezone.utc).replace(tzinfo=None)
    db.commit()


def seed_films(db: Session) -> int:
    if db.query(Film).count() > 0:
        logger.info("Film table already populated, skipping seed")
        return 0

    for data in SAMPLE_FILMS:
        db.add(Film(**data))
    db.commit()

    logger.info("Seeded %d films", len(SAMPLE_FILMS))
    return len(SAMPLE_FILMS)
