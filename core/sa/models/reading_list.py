# core/sa/models/reading_list.py
from enum import Enum
from sqlalchemy import String, Text, ForeignKey, Index
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, new_id

class Visibility(str, Enum):
    PUBLIC = "PUBLIC"     # Readable by anyone
    PRIVATE = "PRIVATE"   # Readable only by the owner

class BookList(Base, TimestampMixin):
    """A named, user-curated collection of book-at-place entries."""
    __tablename__ = 'list'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    visibility: Mapped[Visibility] = mapped_column(
        SAEnum(Visibility, name='visibility'), nullable=False, default=Visibility.PRIVATE
    )
    # Opaque caller identity; absent for anonymous lists
    owner_id: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Items are removed explicitly by ListRepository.delete_items_by_list,
    # never through an ORM cascade.
    items = relationship(
        'ListItem',
        back_populates='list',
        order_by='ListItem.created_at',
        passive_deletes=True,
    )

    __table_args__ = (
        Index('idx_list_owner_id', 'owner_id'),
        Index('idx_list_visibility', 'visibility'),
        Index('idx_list_updated_at', 'updated_at'),
    )

class ListItem(Base, TimestampMixin):
    """One (book, place, note) association owned by exactly one list."""
    __tablename__ = 'list_item'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    list_id: Mapped[str] = mapped_column(ForeignKey('list.id'), nullable=False)
    book_id: Mapped[str] = mapped_column(ForeignKey('book.id'), nullable=False)
    place_id: Mapped[str] = mapped_column(ForeignKey('place.id'), nullable=False)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    list = relationship('BookList', back_populates='items')
    book = relationship('Book', back_populates='list_items')
    place = relationship('Place', back_populates='list_items')

    __table_args__ = (
        # Items are always resolved within their owning list
        Index('idx_list_item_list_id_id', 'list_id', 'id'),
        Index('idx_list_item_book_id', 'book_id'),
        Index('idx_list_item_place_id', 'place_id'),
    )
