# core/sa/repositories/__init__.py
from .book import BookRepository
from .place import PlaceRepository
from .reading_list import ListRepository

__all__ = ['BookRepository', 'PlaceRepository', 'ListRepository']
