# api/routes/books.py

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.services.catalog_service import CatalogService
from api.schemas.book import Book, BookCreate, BookList

router = APIRouter(prefix="/books", tags=["books"])

@router.get("", response_model=BookList)
def search_books(
    query: Optional[str] = Query(None, description="Search books by title or author"),
    db: Session = Depends(get_db)
):
    """
    Search the catalog by title or author.
    
    Returns at most 50 books ordered by title. Without a query every book
    is eligible.
    """
    books = CatalogService(db).search_books(query)
    return {"items": books}

@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(book: BookCreate, db: Session = Depends(get_db)):
    """Add a book to the catalog. A reused ISBN is answered with 409."""
    return CatalogService(db).create_book(book.title, book.author, book.isbn)

@router.get("/{book_id}", response_model=Book)
def get_book(book_id: str, db: Session = Depends(get_db)):
    return CatalogService(db).get_book(book_id)
