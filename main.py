from fastapi import FastAPI, UploadFile, File, HTTPException, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Optional

from config import BOOKS_JSON_PATH
from database import SessionLocal
from schemas import TrackIn
from services.etl import import_books_json, load_books_json
from services.music import add_track, filter_tracks_excluding, list_all_tracks
from services.reports import books_before_year, books_sorted_by_year, favorite_books, find_user
from services.schema import init_schema

app = FastAPI()

# build and fill the in-memory database once at startup
with SessionLocal() as _db:
    init_schema(_db)
    load_books_json(BOOKS_JSON_PATH, _db)

def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def _book_out(book):
    return {
        "name": book.name,
        "isbn": book.isbn,
        "publishing_year": book.publishing_year,
        "author": book.author,
        "publisher": book.publisher,
    }

@app.get("/")
def health():
    return {"status": "ok"}

@app.get("/music")
def music(db: Session = Depends(get_db)):
    return list_all_tracks(db)

@app.get("/music/filter")
def music_filter(exclude: str = "mt", db: Session = Depends(get_db)):
    return filter_tracks_excluding(db, exclude)

@app.post("/music", status_code=201)
def music_add(track: TrackIn, db: Session = Depends(get_db)):
    try:
        add_track(db, track.id, track.name)
    except IntegrityError:
        raise HTTPException(status_code=409, detail=f"track {track.id} already exists")
    return {"id": track.id, "name": track.name}

@app.post("/import/books")
async def import_books(
    file: UploadFile = File(...),
    db: Session = Depends(get_db)
):
    if not file.filename.endswith(".json"):
        raise HTTPException(status_code=415, detail="upload a .json file")
    content = await file.read()
    result = import_books_json(content, db)
    if not result["ok"]:
        raise HTTPException(status_code=422, detail=result["error"])
    return result

@app.get("/books")
def books(before: Optional[int] = None, db: Session = Depends(get_db)):
    rows = books_sorted_by_year(db) if before is None else books_before_year(db, before)
    return [_book_out(b) for b in rows]

@app.get("/users/{name}/{surname}/books")
def user_books(name: str, surname: str, db: Session = Depends(get_db)):
    user = find_user(db, name, surname)
    if user is None:
        raise HTTPException(status_code=404, detail="user not found")
    return {
        "user": {
            "name": user.name,
            "surname": user.surname,
            "phone": user.phone,
            "subscribed": user.subscribed,
        },
        "books": [_book_out(b) for b in favorite_books(db, name, surname)],
    }
