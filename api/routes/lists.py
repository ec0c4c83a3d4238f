# api/routes/lists.py

from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.services.list_service import ListService
from api.auth import get_caller_id
from api.schemas.reading_list import (
    ListCreate, ListItem, ListItemCreate,
    ReadingList, ReadingListCollection, ReadingListDetail
)

router = APIRouter(prefix="/lists", tags=["lists"])

@router.get("", response_model=ReadingListCollection)
def get_lists(
    caller_id: Optional[str] = Depends(get_caller_id),
    db: Session = Depends(get_db)
):
    """
    Get public lists plus the caller's own lists, most recently updated first.
    """
    lists = ListService(db).list_visible_to(caller_id)
    return {"items": lists}

@router.post("", response_model=ReadingList, status_code=status.HTTP_201_CREATED)
def create_list(
    body: ListCreate,
    caller_id: Optional[str] = Depends(get_caller_id),
    db: Session = Depends(get_db)
):
    """Create a list owned by the caller (anonymous when no token is sent)."""
    return ListService(db).create_list(body.name, body.visibility, owner_id=caller_id)

@router.get("/{list_id}", response_model=ReadingListDetail)
def get_list(list_id: UUID, db: Session = Depends(get_db)):
    """Get a list with its items, each expanded with its book and place."""
    return ListService(db).get_list_detail(str(list_id))

@router.delete("/{list_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_list(list_id: UUID, db: Session = Depends(get_db)):
    """Delete a list together with all of its items."""
    ListService(db).delete_list(str(list_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/{list_id}/items", response_model=ListItem, status_code=status.HTTP_201_CREATED)
def attach_item(list_id: UUID, body: ListItemCreate, db: Session = Depends(get_db)):
    """Add a book-at-place entry to a list."""
    return ListService(db).attach_item(
        str(list_id), str(body.book_id), str(body.place_id), body.note
    )

@router.delete(
    "/{list_id}/items/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response
)
def detach_item(list_id: UUID, item_id: UUID, db: Session = Depends(get_db)):
    """Remove an item from a list. Items of other lists answer 404."""
    ListService(db).detach_item(str(list_id), str(item_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
