from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.auth import require_auth
from app.database import get_db
from app.schemas.common import ErrorResponse
from app.schemas.films import FilmDetail, FilmRequest
from app.services.film_service import (
    create_film,
    delete_film,
    get_film_detail,
    list_films,
    update_film,
)

router = APIRouter(
    prefix="/api/films",
    tags=["Films"],
    dependencies=[Depends(require_auth)],
    responses={401: {"model": ErrorResponse}},
)


def _parse_film_id(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid film ID") from None


def _check_required(request: FilmRequest) -> None:
    if not request.title or not request.director or request.year == 0:
        raise HTTPException(status_code=400, detail="Title, director, and year are required")


@router.get("", response_model=List[FilmDetail], summary="List films")
def list_films_endpoint(db: Session = Depends(get_db)):
    return list_films(db)


@router.get("/{film_id}", response_model=FilmDetail, summary="Get film details")
def get_film_endpoint(film_id: str, db: Session = Depends(get_db)):
    film = get_film_detail(db, _parse_film_id(film_id))
    if not film:
        raise HTTPException(status_code=404, detail="Film not found")
    return film


@router.post(
    "",
    response_model=FilmDetail,
    status_code=status.HTTP_201_CREATED,
    summary="Add film",
)
def create_film_endpoint(request: FilmRequest, db: Session = Depends(get_db)):
    _check_required(request)
    return create_film(db, request.title, request.director, request.year, request.genre)


@router.put("/{film_id}", response_model=FilmDetail, summary="Update film")
def update_film_endpoint(film_id: str, request: FilmRequest, db: Session = Depends(get_db)):
    parsed_id = _parse_film_id(film_id)
    _check_required(request)
    try:
        return update_film(db, parsed_id, request.title, request.director, request.year, request.genre)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.delete("/{film_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete film")
def delete_film_endpoint(film_id: str, db: Session = Depends(get_db)):
    try:
        delete_film(db, _parse_film_id(film_id))
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
