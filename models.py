from sqlalchemy import Column, Integer, String, Text, Boolean
from database import Base

class Music(Base):
    __tablename__ = "music"
    id   = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(Text, nullable=False)

class User(Base):
    __tablename__ = "users"
    id         = Column(Integer, primary_key=True, autoincrement=True)
    name       = Column(String(50), nullable=False)
    surname    = Column(String(100), nullable=False)
    subscribed = Column(Boolean, nullable=False, default=False)
    phone      = Column(String(15), nullable=False)

    def __str__(self):
        status = "активна" if self.subscribed else "неактивна"
        return f"{self.name} {self.surname}, телефон: {self.phone}, подписка: {status}"

class Book(Base):
    __tablename__ = "books"
    id              = Column(Integer, primary_key=True, autoincrement=True)
    name            = Column(String(100))
    isbn            = Column(String(100))                # natural key, checked before insert
    publishing_year = Column(Integer)
    author          = Column(String(100))
    publisher       = Column(String(100))

    # no user_id: favorites are not persisted as a relation

    def __str__(self):
        return (f"{self.name} ({self.isbn}), автор: {self.author}, "
                f"год: {self.publishing_year}, издатель: {self.publisher}")
