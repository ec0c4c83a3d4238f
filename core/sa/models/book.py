# core/sa/models/book.py
from sqlalchemy import String, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, new_id

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str | None] = mapped_column(String(20), unique=True, nullable=True)

    # Relationships
    list_items = relationship('ListItem', back_populates='book')

    __table_args__ = (
        Index('idx_book_title', 'title'),
        Index('idx_book_author', 'author'),
    )

    def __repr__(self) -> str:
        return f"<Book {self.title!r} by {self.author!r}>"
