# core/sa/models/__init__.py
from .base import Base, TimestampMixin, utcnow
from .book import Book
from .place import Place
from .reading_list import BookList, ListItem, Visibility

__all__ = [
    'Base',
    'TimestampMixin',
    'utcnow',
    'Book',
    'Place',
    'BookList',
    'ListItem',
    'Visibility'
]
