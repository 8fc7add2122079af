from sqlalchemy import true
from sqlalchemy.orm import Session

from models import User, Book


def books_sorted_by_year(db: Session) -> list:
    return db.query(Book).order_by(Book.publishing_year, Book.id).all()


def books_before_year(db: Session, year: int) -> list:
    return (
        db.query(Book)
          .filter(Book.publishing_year < year)
          .order_by(Book.publishing_year, Book.id)
          .all()
    )


def find_user(db: Session, name: str, surname: str):
    return db.query(User).filter_by(name=name, surname=surname).first()


def favorite_books(db: Session, name: str, surname: str) -> list:
    """Books listed for a user.

    There is no link between users and books, so this is a cross join
    filtered on the user: every book comes back whoever asked.
    """
    return (
        db.query(Book)
          .join(User, true())
          .filter(User.name == name, User.surname == surname)
          .order_by(Book.publishing_year, Book.id)
          .all()
    )


def print_user_with_books(db: Session, name: str, surname: str) -> None:
    user = find_user(db, name, surname)
    if user is None:
        return

    print(f"Пользователь: {user}")
    print("Любимые книги:")
    for book in favorite_books(db, name, surname):
        print(f"  {book}")
