# api/schemas/reading_list.py
from datetime import datetime
from typing import Optional, List
from uuid import UUID
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from core.sa.models import Visibility
from api.schemas.book import Book
from api.schemas.place import Place

class ListCreate(BaseModel):
    name: str = Field(min_length=1)
    visibility: Visibility = Visibility.PRIVATE

class ListItemCreate(BaseModel):
    # camelCase names are what the web client sends
    book_id: UUID = Field(validation_alias=AliasChoices('book_id', 'bookId'))
    place_id: UUID = Field(validation_alias=AliasChoices('place_id', 'placeId'))
    note: Optional[str] = None

class ListItem(BaseModel):
    id: str
    list_id: str
    book_id: str
    place_id: str
    note: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class ListItemDetail(ListItem):
    book: Book
    place: Place

class ReadingList(BaseModel):
    id: str
    name: str
    visibility: Visibility
    owner_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class ReadingListDetail(ReadingList):
    items: List[ListItemDetail] = []

class ReadingListCollection(BaseModel):
    items: List[ReadingList]

    model_config = ConfigDict(from_attributes=True)
