import logging

from pydantic import ValidationError
from sqlalchemy.orm import Session

from models import User, Book
from schemas import BookRecord, UserRecord, parse_users

logger = logging.getLogger(__name__)

# demo step 7: the author's own record and favorites
PERSONAL_USER = UserRecord(name="Александр", surname="Рубцов", subscribed=True, phone="8***2699236")
PERSONAL_BOOKS = [
    BookRecord(name="Martin Iden", isbn="9780132350884", publishing_year=2008,
               author="Jack London", publisher="Jack London"),
    BookRecord(name="Effective Java", isbn="9780134685991", publishing_year=2018,
               author="Joshua Bloch", publisher="Addison-Wesley"),
]

def user_exists(db: Session, user: UserRecord) -> bool:
    return (
        db.query(User.id)
          .filter_by(name=user.name, surname=user.surname, phone=user.phone)
          .first()
    ) is not None

def add_user(db: Session, user: UserRecord) -> User:
    row = User(name=user.name, surname=user.surname,
               subscribed=user.subscribed, phone=user.phone)
    db.add(row)
    db.flush()
    return row

def book_exists(db: Session, book: BookRecord) -> bool:
    return db.query(Book.id).filter_by(isbn=book.isbn).first() is not None

def add_book(db: Session, book: BookRecord) -> Book:
    row = Book(name=book.name, isbn=book.isbn, publishing_year=book.publishing_year,
               author=book.author, publisher=book.publisher)
    db.add(row)
    db.flush()
    return row

def _store(db: Session, users) -> dict:
    users_added = 0
    books_added = 0

    for user in users:
        # insert-if-absent on (name, surname, phone); existing rows are left as they are
        if not user_exists(db, user):
            add_user(db, user)
            users_added += 1

        for book in user.favorite_books or []:
            if not book_exists(db, book):
                add_book(db, book)
                books_added += 1

    db.commit()
    return {"users_added": users_added, "books_added": books_added}

def import_books_json(content: bytes, db: Session) -> dict:
    # Parse a books.json payload and insert the users and books it names
    try:
        users = parse_users(content)
    except ValidationError as e:
        logger.error("could not parse books.json: %s", e)
        return {"ok": False, "error": f"invalid books.json: {e.error_count()} error(s)"}

    if not users:
        logger.error("books.json holds no users")
        return {"ok": False, "error": "no users in books.json"}

    result = _store(db, users)
    logger.info("loaded %d users: %d new users, %d new books",
                len(users), result["users_added"], result["books_added"])
    return {"ok": True, **result, "total_users": len(users)}

def load_books_json(path, db: Session) -> dict:
    try:
        with open(path, "rb") as f:
            content = f.read()
    except OSError as e:
        logger.error("could not read %s: %s", path, e)
        return {"ok": False, "error": f"cannot read {path}"}
    return import_books_json(content, db)

def add_personal_info(db: Session) -> dict:
    me = PERSONAL_USER.model_copy(update={"favorite_books": PERSONAL_BOOKS})
    return _store(db, [me])
