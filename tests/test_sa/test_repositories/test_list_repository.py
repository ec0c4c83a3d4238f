# tests/test_sa/test_repositories/test_list_repository.py

import pytest
from datetime import timedelta
from core.sa.models import BookList, ListItem, Visibility
from core.sa.repositories.reading_list import ListRepository

@pytest.fixture
def list_repo(db_session):
    """Fixture to create a ListRepository instance."""
    return ListRepository(db_session)

@pytest.fixture
def mixed_lists(db_session):
    """Lists with every combination of visibility and owner."""
    lists = {
        "public_u1": BookList(name="Public by u1", visibility=Visibility.PUBLIC, owner_id="u1"),
        "private_u1": BookList(name="Private by u1", visibility=Visibility.PRIVATE, owner_id="u1"),
        "private_u2": BookList(name="Private by u2", visibility=Visibility.PRIVATE, owner_id="u2"),
        "public_anon": BookList(name="Public anonymous", visibility=Visibility.PUBLIC),
        "private_anon": BookList(name="Private anonymous", visibility=Visibility.PRIVATE),
    }
    db_session.add_all(lists.values())
    db_session.commit()
    return lists

def test_get_by_id(list_repo, sample_list):
    fetched = list_repo.get_by_id(sample_list.id)
    assert fetched is not None
    assert fetched.name == "Paris trip"

def test_get_with_items(list_repo, sample_item, sample_list):
    """Test that items come back with their book and place."""
    fetched = list_repo.get_with_items(sample_list.id)
    assert len(fetched.items) == 1
    assert fetched.items[0].book.author == "Victor Hugo"
    assert fetched.items[0].place.lat == pytest.approx(48.8526)

def test_list_visible_anonymous(list_repo, mixed_lists):
    """Test that anonymous callers only see public lists."""
    names = {l.name for l in list_repo.list_visible(None)}
    assert names == {"Public by u1", "Public anonymous"}

def test_list_visible_owner(list_repo, mixed_lists):
    """Test that an owner sees public lists plus their own, each once."""
    results = list_repo.list_visible("u1")
    names = [l.name for l in results]
    assert sorted(names) == ["Private by u1", "Public anonymous", "Public by u1"]
    assert len(names) == len(set(names))

def test_list_visible_orders_by_updated_at(list_repo, db_session, mixed_lists):
    """Test that the most recently updated list comes first."""
    oldest = mixed_lists["public_u1"]
    oldest.updated_at = oldest.updated_at + timedelta(days=1)
    db_session.commit()
    results = list_repo.list_visible("u1")
    assert results[0].id == oldest.id
    stamps = [l.updated_at for l in results]
    assert stamps == sorted(stamps, reverse=True)

def test_get_item_in_list_is_scoped(list_repo, db_session, sample_item, sample_book, sample_place):
    """Test that an item is only found through its own list."""
    other = BookList(name="Other", visibility=Visibility.PUBLIC)
    db_session.add(other)
    db_session.commit()
    assert list_repo.get_item_in_list(sample_item.list_id, sample_item.id) is not None
    assert list_repo.get_item_in_list(other.id, sample_item.id) is None

def test_delete_items_by_list(list_repo, db_session, sample_item, sample_list):
    list_id, item_id = sample_list.id, sample_item.id
    removed = list_repo.delete_items_by_list(list_id)
    list_repo.delete_list(list_id)
    db_session.commit()
    assert removed == 1
    assert db_session.get(ListItem, item_id) is None
    assert list_repo.get_by_id(list_id) is None

def test_insert_item(list_repo, db_session, sample_list, sample_book, sample_place):
    item = list_repo.insert_item(sample_list.id, sample_book.id, sample_place.id)
    db_session.commit()
    fetched = db_session.get(ListItem, item.id)
    assert fetched.note is None
    assert fetched.list_id == sample_list.id
