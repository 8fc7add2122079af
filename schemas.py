"""
Record types for the books.json payload.

The file is a list of users; each user may carry a list of favorite books.
`favorite_books` is None when the key is absent or null in the file.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class BookRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    isbn: str
    publishing_year: int = Field(..., alias="publishingYear")
    author: str
    publisher: str


class UserRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    surname: str
    subscribed: bool = False
    phone: str
    favorite_books: Optional[List[BookRecord]] = Field(None, alias="favoriteBooks")


class TrackIn(BaseModel):
    id: int
    name: str


_users_adapter = TypeAdapter(Optional[List[UserRecord]])


def parse_users(raw) -> Optional[List[UserRecord]]:
    # raises pydantic.ValidationError on malformed JSON or a wrong shape
    return _users_adapter.validate_json(raw)
