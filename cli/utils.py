import functools
import click
from contextlib import contextmanager
from typing import Iterator
from sqlalchemy.orm import Session

from core.errors import LivresLieuxError, NotFound
from core.sa.database import Database
from core.sa.models import BookList, Place

@contextmanager
def open_session() -> Iterator[Session]:
    """Open a session on the configured database and close it afterwards"""
    with Database().session_scope() as session:
        yield session

def handle_errors(func):
    """Report core errors in red and exit non-zero instead of printing a traceback"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except NotFound as e:
            click.echo(click.style(e.message, fg='yellow'), err=True)
            raise SystemExit(1)
        except LivresLieuxError as e:
            click.echo(click.style(f"Error: {e.message}", fg='red'), err=True)
            raise SystemExit(1)
    return wrapper

def format_place(place: Place) -> str:
    return (
        click.style(place.name, fg='cyan') +
        f" ({place.lat:.5f}, {place.lng:.5f}) " +
        click.style(place.id, fg='blue')
    )

def print_list_summary(book_list: BookList) -> None:
    """Print one line describing a list"""
    click.echo(
        click.style(book_list.name, fg='green') +
        f" [{book_list.visibility.value}] " +
        click.style(book_list.id, fg='blue') +
        f" updated {book_list.updated_at:%Y-%m-%d %H:%M:%S}"
    )
