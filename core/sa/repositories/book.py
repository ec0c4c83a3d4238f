# core/sa/repositories/book.py
from typing import Optional, List
from sqlalchemy import or_
from sqlalchemy.orm import Session
from ..models import Book

class BookRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, book_id: str) -> Optional[Book]:
        """Get a book by its ID"""
        return self.session.get(Book, book_id)

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Get a book by its ISBN"""
        return self.session.query(Book).filter(Book.isbn == isbn).first()

    def search(self, query: Optional[str] = None, limit: int = 50) -> List[Book]:
        """Search books by title or author.
        
        Args:
            query: Case-insensitive substring matched against title and author.
                   Empty or None returns every book.
            limit: Maximum number of results to return
            
        Returns:
            List of Book objects ordered by title
        """
        base_query = self.session.query(Book)

        if query and query.strip():
            pattern = f"%{query.strip()}%"
            base_query = base_query.filter(
                or_(Book.title.ilike(pattern), Book.author.ilike(pattern))
            )

        return base_query.order_by(Book.title.asc()).limit(limit).all()

    def insert_book(self, title: str, author: str, isbn: Optional[str] = None) -> Book:
        """Add a new book to the session and flush it so its ID is assigned"""
        book = Book(title=title, author=author, isbn=isbn)
        self.session.add(book)
        self.session.flush()
        return book
