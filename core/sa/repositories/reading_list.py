# core/sa/repositories/reading_list.py
from typing import List, Optional
from sqlalchemy import desc, or_
from sqlalchemy.orm import Session, joinedload
from core.sa.models import BookList, ListItem, Visibility

class ListRepository:
    """Repository for lists and the items they own.

    Write methods add, flush or delete within the current session but never
    commit; the calling service decides where a transaction ends.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, list_id: str) -> Optional[BookList]:
        return self.session.get(BookList, list_id)

    def get_with_items(self, list_id: str) -> Optional[BookList]:
        """Get a list with its items, and each item's book and place, loaded."""
        return (
            self.session.query(BookList)
            .options(
                joinedload(BookList.items).joinedload(ListItem.book),
                joinedload(BookList.items).joinedload(ListItem.place)
            )
            .filter(BookList.id == list_id)
            .first()
        )

    def list_visible(self, owner_id: Optional[str] = None) -> List[BookList]:
        """Get public lists plus, when owner_id is given, every list it owns.

        A single OR filter means a public list owned by owner_id comes back once.
        """
        conditions = [BookList.visibility == Visibility.PUBLIC]
        if owner_id:
            conditions.append(BookList.owner_id == owner_id)

        return (
            self.session.query(BookList)
            .filter(or_(*conditions))
            .order_by(desc(BookList.updated_at), desc(BookList.created_at))
            .all()
        )

    def insert_list(
        self,
        name: str,
        visibility: Visibility,
        owner_id: Optional[str] = None
    ) -> BookList:
        book_list = BookList(name=name, visibility=visibility, owner_id=owner_id)
        self.session.add(book_list)
        self.session.flush()
        return book_list

    def get_item_in_list(self, list_id: str, item_id: str) -> Optional[ListItem]:
        """Get an item only if it belongs to the given list."""
        return (
            self.session.query(ListItem)
            .filter(
                ListItem.list_id == list_id,
                ListItem.id == item_id
            )
            .first()
        )

    def insert_item(
        self,
        list_id: str,
        book_id: str,
        place_id: str,
        note: Optional[str] = None
    ) -> ListItem:
        item = ListItem(list_id=list_id, book_id=book_id, place_id=place_id, note=note)
        self.session.add(item)
        self.session.flush()
        return item

    def delete_item(self, item: ListItem) -> None:
        self.session.delete(item)
        self.session.flush()

    def delete_items_by_list(self, list_id: str) -> int:
        """Delete every item owned by a list. Returns the number of rows removed."""
        return (
            self.session.query(ListItem)
            .filter(ListItem.list_id == list_id)
            .delete(synchronize_session='fetch')
        )

    def delete_list(self, list_id: str) -> int:
        """Delete the list row itself. Its items must already be gone."""
        return (
            self.session.query(BookList)
            .filter(BookList.id == list_id)
            .delete(synchronize_session='fetch')
        )
