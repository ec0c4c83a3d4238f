# core/services/catalog_service.py

import logging
import math
from typing import List, Optional

from sqlalchemy.orm import Session

from core.errors import Conflict, InvalidInput, NotFound
from core.sa.database import store_errors, transaction
from core.sa.models import Book, Place
from core.sa.repositories.book import BookRepository
from core.sa.repositories.place import PlaceRepository

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 50
MIN_ISBN_LENGTH = 5


class CatalogService:
    """Books and places that list items point at."""

    def __init__(self, session: Session):
        self.session = session
        self.books = BookRepository(session)
        self.places = PlaceRepository(session)

    def search_books(self, query: Optional[str] = None, limit: int = SEARCH_LIMIT) -> List[Book]:
        """Search books by title or author, ordered by title"""
        with store_errors(self.session):
            return self.books.search(query, limit=min(limit, SEARCH_LIMIT))

    def get_book(self, book_id: str) -> Book:
        with store_errors(self.session):
            book = self.books.get_by_id(book_id)
        if book is None:
            raise NotFound("Book", book_id)
        return book

    def create_book(self, title: str, author: str, isbn: Optional[str] = None) -> Book:
        """Add a book to the catalog.

        Args:
            title: Book title, must not be blank
            author: Author name, must not be blank
            isbn: Optional ISBN, unique across the catalog when given

        Returns:
            The created Book

        Raises:
            InvalidInput: If title or author is blank, or the ISBN is too short
            Conflict: If another book already has this ISBN
        """
        if not title or not title.strip():
            raise InvalidInput("Book title must not be empty")
        if not author or not author.strip():
            raise InvalidInput("Book author must not be empty")
        if isbn is not None:
            isbn = isbn.strip()
            if len(isbn) < MIN_ISBN_LENGTH:
                raise InvalidInput(f"ISBN must be at least {MIN_ISBN_LENGTH} characters")

        with transaction(self.session):
            if isbn and self.books.get_by_isbn(isbn) is not None:
                raise Conflict(f"A book with ISBN '{isbn}' already exists")
            book = self.books.insert_book(title.strip(), author.strip(), isbn)

        logger.info("Created book %s (%s)", book.id, book.title)
        return book

    def get_place(self, place_id: str) -> Place:
        with store_errors(self.session):
            place = self.places.get_by_id(place_id)
        if place is None:
            raise NotFound("Place", place_id)
        return place

    def create_place(self, name: str, lat: float, lng: float) -> Place:
        """Add a place to the catalog.

        Raises:
            InvalidInput: If the name is blank or the coordinates are out of range
        """
        if not name or not name.strip():
            raise InvalidInput("Place name must not be empty")
        if not (math.isfinite(lat) and -90 <= lat <= 90):
            raise InvalidInput(f"Latitude must be between -90 and 90, got {lat}")
        if not (math.isfinite(lng) and -180 <= lng <= 180):
            raise InvalidInput(f"Longitude must be between -180 and 180, got {lng}")

        with transaction(self.session):
            place = self.places.insert_place(name.strip(), lat, lng)

        logger.info("Created place %s (%s)", place.id, place.name)
        return place
