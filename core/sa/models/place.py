# core/sa/models/place.py
from sqlalchemy import String, Float, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, new_id

class Place(Base, TimestampMixin):
    __tablename__ = 'place'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lng: Mapped[float] = mapped_column(Float, nullable=False)

    # Relationships
    list_items = relationship('ListItem', back_populates='place')

    __table_args__ = (
        # Bounding box lookups
        Index('idx_place_lat', 'lat'),
        Index('idx_place_lng', 'lng'),
    )

    def __repr__(self) -> str:
        return f"<Place {self.name!r} ({self.lat}, {self.lng})>"
