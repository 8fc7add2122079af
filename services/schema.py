from sqlalchemy.orm import Session

from database import Base
from models import Music, User, Book

SEED_TRACKS = [
    (1, "Bohemian Rhapsody"),
    (2, "Stairway to Heaven"),
    (3, "Imagine"),
    (4, "Sweet Child O Mine"),
    (5, "Hey Jude"),
    (6, "Hotel California"),
    (7, "Billie Jean"),
    (8, "Wonderwall"),
    (9, "Smells Like Teen Spirit"),
    (10, "Let It Be"),
    (11, "I Want It All"),
    (12, "November Rain"),
    (13, "Losing My Religion"),
    (14, "One"),
    (15, "With or Without You"),
    (16, "Sweet Caroline"),
    (17, "Yesterday"),
    (18, "Dont Stop Believin"),
    (19, "Crazy Train"),
    (20, "Always"),
]

TABLES = [Music.__table__, User.__table__, Book.__table__]


def init_schema(db: Session) -> None:
    # create_all checks for each table first, so this is safe to repeat
    Base.metadata.create_all(bind=db.connection(), tables=TABLES)

    # seed only an empty table
    if db.query(Music.id).first() is None:
        db.add_all(Music(id=track_id, name=name) for track_id, name in SEED_TRACKS)
    db.commit()


def drop_tables(db: Session) -> None:
    Base.metadata.drop_all(bind=db.connection(), tables=TABLES)
    db.commit()
