"""
Console demo: build the schema, walk through the eight fixed steps, drop it all.

    $ shelf-demo

Reads ./books.json for step 4. A missing or broken file is reported and the
run goes on; a database error stops the run with a stack trace.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import BOOKS_JSON_PATH, DATABASE_URL, LOG_FORMAT, LOG_LEVEL
from database import make_engine
from services.etl import PERSONAL_USER, add_personal_info, load_books_json
from services.music import add_track, filter_tracks_excluding, list_all_tracks
from services.reports import books_before_year, books_sorted_by_year, print_user_with_books
from services.schema import drop_tables, init_schema

logger = logging.getLogger(__name__)


def run(db: Session, json_path=BOOKS_JSON_PATH):
    init_schema(db)

    print("1. Все музыкальные композиции:")
    for name in list_all_tracks(db):
        print(name)

    print("\n2. Композиции без букв 'm' и 't':")
    for name in filter_tracks_excluding(db, "mt"):
        print(name)

    print("\n3. Добавляем новую композицию...")
    add_track(db, 21, "Thunderstruck")
    print("Добавлена новая композиция: Thunderstruck")

    print(f"\n4. Обрабатываем {json_path}...")
    result = load_books_json(json_path, db)
    if result["ok"]:
        print(f"Добавлено пользователей: {result['users_added']}, книг: {result['books_added']}")

    print("\n5. Книги, отсортированные по году издания:")
    for book in books_sorted_by_year(db):
        print(book)

    print("\n6. Книги, изданные до 2000 года:")
    for book in books_before_year(db, 2000):
        print(book)

    print("\n7. Добавляем информацию о себе...")
    add_personal_info(db)
    print("Информация добавлена:")
    print_user_with_books(db, PERSONAL_USER.name, PERSONAL_USER.surname)

    print("\n8. Удаляем таблицы...")
    drop_tables(db)
    print("Таблицы удалены.")


def main(json_path=BOOKS_JSON_PATH, database_url=DATABASE_URL) -> int:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    engine = make_engine(database_url)
    try:
        with Session(engine) as db:
            run(db, json_path)
    except SQLAlchemyError:
        logger.exception("database error, stopping")
        return 1
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
