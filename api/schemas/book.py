# api/schemas/book.py
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

class BookBase(BaseModel):
    title: str
    author: str
    isbn: Optional[str] = None

class BookCreate(BookBase):
    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    isbn: Optional[str] = Field(default=None, min_length=5)

class Book(BookBase):
    id: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class BookList(BaseModel):
    items: List[Book]
    
    model_config = ConfigDict(from_attributes=True)
