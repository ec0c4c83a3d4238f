# tests/conftest.py
import os
import sys
import pytest
from pathlib import Path
from sqlalchemy.sql import text

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from core.sa.models import Base, Book, Place, BookList, ListItem, Visibility
from core.sa.database import Database

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_livres_lieux.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.engine.dispose()
    try:
        os.remove(test_db_path)
    except OSError:
        pass  # Ignore errors if file doesn't exist

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    # Delete all data from tables in reverse order of dependencies
    db_session.execute(text("DELETE FROM list_item"))
    db_session.execute(text("DELETE FROM list"))
    db_session.execute(text("DELETE FROM place"))
    db_session.execute(text("DELETE FROM book"))
    db_session.commit()
    yield
    db_session.rollback()

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def sample_book(db_session):
    """Create a sample book for testing."""
    book = Book(title="Les Misérables", author="Victor Hugo", isbn="9782253096344")
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def sample_place(db_session):
    """Create a sample place for testing."""
    place = Place(name="Shakespeare and Company", lat=48.8526, lng=2.3471)
    db_session.add(place)
    db_session.commit()
    return place

@pytest.fixture
def sample_list(db_session):
    """Create an empty private list owned by user u1."""
    book_list = BookList(name="Paris trip", visibility=Visibility.PRIVATE, owner_id="u1")
    db_session.add(book_list)
    db_session.commit()
    return book_list

@pytest.fixture
def sample_item(db_session, sample_list, sample_book, sample_place):
    """Attach the sample book and place to the sample list."""
    item = ListItem(
        list_id=sample_list.id,
        book_id=sample_book.id,
        place_id=sample_place.id,
        note="great read"
    )
    db_session.add(item)
    db_session.commit()
    return item

@pytest.fixture
def paris_places(db_session):
    """Five places around (48.85, 2.35): three within a 2km box, two outside."""
    places = [
        Place(name="Notre-Dame", lat=48.8530, lng=2.3499),
        Place(name="Louvre", lat=48.8606, lng=2.3376),
        Place(name="Jardin du Luxembourg", lat=48.8462, lng=2.3372),
        Place(name="Sacré-Cœur", lat=48.8867, lng=2.3431),
        Place(name="Versailles", lat=48.8049, lng=2.1204),
    ]
    db_session.add_all(places)
    db_session.commit()
    return places
