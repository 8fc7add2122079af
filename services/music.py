import logging

from sqlalchemy import func, insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models import Music

logger = logging.getLogger(__name__)


def list_all_tracks(db: Session) -> list:
    return [name for (name,) in db.query(Music.name).all()]


def filter_tracks_excluding(db: Session, excluded_chars: str) -> list:
    """Titles that contain none of `excluded_chars`, ignoring case.

    One NOT LIKE condition per character; an empty string filters nothing.
    """
    lowered = func.lower(Music.name)
    conditions = [~lowered.contains(ch.lower(), autoescape=True) for ch in excluded_chars]
    rows = db.query(Music.name).filter(*conditions).all()
    return [name for (name,) in rows]


def add_track(db: Session, track_id: int, name: str) -> None:
    # Core insert so a duplicate id reaches the database as a primary-key violation
    try:
        db.execute(insert(Music).values(id=track_id, name=name))
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.error("track id %s already exists", track_id)
        raise
