import click
from typing import Optional
from core.sa.models import Visibility
from core.services.list_service import ListService
from ..utils import open_session, handle_errors, print_list_summary, format_place

@click.group(name='list')
def list_group():
    """List management commands"""
    pass

@list_group.command()
@click.argument('name')
@click.option('--visibility', type=click.Choice([v.value for v in Visibility], case_sensitive=False),
              default=Visibility.PRIVATE.value, help='Who can see the list')
@click.option('--owner', default=None, help='Owner user ID (omit for an anonymous list)')
@handle_errors
def create(name: str, visibility: str, owner: Optional[str]):
    """Create a new list

    Example:
        livres-lieux list create "Paris trip" --visibility public --owner u1
    """
    with open_session() as session:
        created = ListService(session).create_list(name, visibility, owner_id=owner)
        click.echo(click.style("Created list:", fg='green'))
        print_list_summary(created)

@list_group.command()
@click.option('--user', default=None, help='Caller user ID; omit to see public lists only')
@handle_errors
def visible(user: Optional[str]):
    """Show lists visible to a user"""
    with open_session() as session:
        lists = ListService(session).list_visible_to(user)
        if not lists:
            click.echo(click.style("No lists found", fg='yellow'))
            return
        for book_list in lists:
            print_list_summary(book_list)

@list_group.command()
@click.argument('list_id')
@handle_errors
def show(list_id: str):
    """Show a list with its items"""
    with open_session() as session:
        book_list = ListService(session).get_list_detail(list_id)
        print_list_summary(book_list)
        if not book_list.items:
            click.echo("  (no items)")
        for item in book_list.items:
            click.echo(f"  - {item.book.title} by {item.book.author} @ " + format_place(item.place))
            if item.note:
                click.echo(f"      {item.note}")
            click.echo(click.style(f"      item {item.id}", fg='blue'))

@list_group.command()
@click.argument('list_id')
@click.option('--book', 'book_id', required=True, help='Book ID')
@click.option('--place', 'place_id', required=True, help='Place ID')
@click.option('--note', default=None, help='Optional note')
@handle_errors
def attach(list_id: str, book_id: str, place_id: str, note: Optional[str]):
    """Attach a book at a place to a list"""
    with open_session() as session:
        item = ListService(session).attach_item(list_id, book_id, place_id, note)
        click.echo(click.style("Attached item: ", fg='green') + item.id)

@list_group.command()
@click.argument('list_id')
@click.argument('item_id')
@handle_errors
def detach(list_id: str, item_id: str):
    """Remove an item from a list"""
    with open_session() as session:
        ListService(session).detach_item(list_id, item_id)
        click.echo(click.style(f"Removed item {item_id}", fg='green'))

@list_group.command()
@click.argument('list_id')
@click.confirmation_option(prompt='Delete this list and all of its items?')
@handle_errors
def delete(list_id: str):
    """Delete a list and all of its items"""
    with open_session() as session:
        ListService(session).delete_list(list_id)
        click.echo(click.style(f"Deleted list {list_id}", fg='green'))
