import json

import pytest
from sqlalchemy.orm import Session

from database import make_engine
from services.schema import init_schema


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    eng = make_engine("sqlite://")
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    """Session over an initialised schema (tables created, music seeded)."""
    with Session(engine) as session:
        init_schema(session)
        yield session


@pytest.fixture
def one_user_payload():
    return [
        {
            "name": "Иван",
            "surname": "Петров",
            "subscribed": True,
            "phone": "+79161234567",
            "favoriteBooks": [
                {
                    "name": "Effective Java",
                    "isbn": "9780134685991",
                    "publishingYear": 2018,
                    "author": "Joshua Bloch",
                    "publisher": "Addison-Wesley",
                },
                {
                    "name": "Martin Iden",
                    "isbn": "9780132350884",
                    "publishingYear": 2008,
                    "author": "Jack London",
                    "publisher": "Jack London",
                },
            ],
        }
    ]


@pytest.fixture
def books_json(tmp_path, one_user_payload):
    """books.json on disk with one user and two favorite books."""
    path = tmp_path / "books.json"
    path.write_text(json.dumps(one_user_payload, ensure_ascii=False), encoding="utf-8")
    return path
