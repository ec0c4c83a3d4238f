# core/sa/__init__.py
from .database import Database, transaction, store_errors
from .models import (
    Base, Book, Place, BookList, ListItem, Visibility
)

__all__ = [
    'Database',
    'transaction',
    'store_errors',
    'Base',
    'Book',
    'Place',
    'BookList',
    'ListItem',
    'Visibility'
]
