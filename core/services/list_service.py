# core/services/list_service.py

import logging
from datetime import timedelta
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from core.errors import InvalidInput, NotFound
from core.sa.database import store_errors, transaction
from core.sa.models import BookList, ListItem, Visibility, utcnow
from core.sa.repositories.book import BookRepository
from core.sa.repositories.place import PlaceRepository
from core.sa.repositories.reading_list import ListRepository

logger = logging.getLogger(__name__)


def parse_visibility(value: Union[Visibility, str, None]) -> Visibility:
    """Coerce a visibility given as enum or (case-insensitive) name. None means PRIVATE."""
    if value is None:
        return Visibility.PRIVATE
    if isinstance(value, Visibility):
        return value
    try:
        return Visibility(str(value).strip().upper())
    except ValueError:
        choices = ", ".join(v.value for v in Visibility)
        raise InvalidInput(f"Invalid visibility '{value}'. Must be one of: {choices}")


class ListService:
    """Lifecycle of lists and the items they own.

    A list is created, has items attached and detached any number of times,
    and is finally deleted together with its items. Every write runs in its
    own transaction on the session handed in by the caller.
    """

    def __init__(self, session: Session):
        self.session = session
        self.lists = ListRepository(session)
        self.books = BookRepository(session)
        self.places = PlaceRepository(session)

    def create_list(
        self,
        name: str,
        visibility: Union[Visibility, str, None] = None,
        owner_id: Optional[str] = None
    ) -> BookList:
        """Create a new, empty list.

        Args:
            name: Display name, must not be blank
            visibility: PUBLIC or PRIVATE, defaults to PRIVATE
            owner_id: Caller identity, None for an anonymous list

        Returns:
            The created BookList

        Raises:
            InvalidInput: If the name is blank or the visibility unknown
        """
        if name is None or not name.strip():
            raise InvalidInput("List name must not be empty")
        visibility = parse_visibility(visibility)

        with transaction(self.session):
            book_list = self.lists.insert_list(name.strip(), visibility, owner_id)

        logger.info("Created %s list %s (owner=%s)", visibility.value, book_list.id, owner_id)
        return book_list

    def list_visible_to(self, caller_id: Optional[str] = None) -> List[BookList]:
        """Public lists plus the caller's own lists, most recently touched first"""
        with store_errors(self.session):
            return self.lists.list_visible(caller_id)

    def get_list_detail(self, list_id: str) -> BookList:
        """Get a list with its items expanded with their book and place.

        Raises:
            NotFound: If no list has this ID
        """
        with store_errors(self.session):
            book_list = self.lists.get_with_items(list_id)
        if book_list is None:
            logger.info("List %s not found", list_id)
            raise NotFound("List", list_id)
        return book_list

    def attach_item(
        self,
        list_id: str,
        book_id: str,
        place_id: str,
        note: Optional[str] = None
    ) -> ListItem:
        """Add a book-at-place entry to a list.

        Args:
            list_id: The owning list
            book_id: Referenced book, must exist
            place_id: Referenced place, must exist
            note: Optional free text

        Returns:
            The created ListItem

        Raises:
            NotFound: If the list, the book or the place does not exist
        """
        with transaction(self.session):
            book_list = self._require_list(list_id)
            if self.books.get_by_id(book_id) is None:
                raise NotFound("Book", book_id)
            if self.places.get_by_id(place_id) is None:
                raise NotFound("Place", place_id)

            item = self.lists.insert_item(list_id, book_id, place_id, note)
            self._touch(book_list)

        logger.info("Attached item %s to list %s", item.id, list_id)
        return item

    def detach_item(self, list_id: str, item_id: str) -> None:
        """Remove an item from a list.

        The item must belong to this list; an item owned by another list is
        reported as not found and left untouched.

        Raises:
            NotFound: If the list does not exist or does not own the item
        """
        with transaction(self.session):
            book_list = self._require_list(list_id)
            item = self.lists.get_item_in_list(list_id, item_id)
            if item is None:
                logger.info("Item %s not found in list %s", item_id, list_id)
                raise NotFound("List item", item_id)

            self.lists.delete_item(item)
            self._touch(book_list)

        logger.info("Detached item %s from list %s", item_id, list_id)

    def delete_list(self, list_id: str) -> None:
        """Delete a list and all of its items in one transaction.

        Items go first, then the list row; a failure in either step rolls
        both back.

        Raises:
            NotFound: If no list has this ID
        """
        with transaction(self.session):
            self._require_list(list_id)
            removed = self.lists.delete_items_by_list(list_id)
            self.lists.delete_list(list_id)

        logger.info("Deleted list %s with %d items", list_id, removed)

    def _require_list(self, list_id: str) -> BookList:
        book_list = self.lists.get_by_id(list_id)
        if book_list is None:
            logger.info("List %s not found", list_id)
            raise NotFound("List", list_id)
        return book_list

    def _touch(self, book_list: BookList) -> None:
        # updated_at must move strictly forward even when the clock has not
        now = utcnow()
        if book_list.updated_at is not None and now <= book_list.updated_at:
            now = book_list.updated_at + timedelta(microseconds=1)
        book_list.updated_at = now
