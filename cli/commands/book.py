import click
from typing import Optional
from core.services.catalog_service import CatalogService
from ..utils import open_session, handle_errors

@click.group()
def book():
    """Book catalog commands"""
    pass

@book.command()
@click.argument('title')
@click.argument('author')
@click.option('--isbn', default=None, help='ISBN, must be unique in the catalog')
@handle_errors
def add(title: str, author: str, isbn: Optional[str]):
    """Add a book to the catalog

    Example:
        livres-lieux book add "Les Misérables" "Victor Hugo" --isbn 9782253096344
    """
    with open_session() as session:
        created = CatalogService(session).create_book(title, author, isbn)
        click.echo(click.style("Created book: ", fg='green') + f"{created.title} ({created.id})")

@book.command()
@click.argument('query', required=False)
@handle_errors
def search(query: Optional[str]):
    """Search books by title or author"""
    with open_session() as session:
        books = CatalogService(session).search_books(query)
        if not books:
            click.echo(click.style("No books found", fg='yellow'))
            return
        for found in books:
            isbn = f" ISBN {found.isbn}" if found.isbn else ""
            click.echo(
                click.style(found.title, fg='cyan') +
                f" by {found.author}{isbn} " +
                click.style(found.id, fg='blue')
            )
