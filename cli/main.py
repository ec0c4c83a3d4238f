# cli/main.py
import logging
import click
from .commands.db import db
from .commands.book import book
from .commands.place import place
from .commands.list import list_group

@click.group()
@click.option('--verbose/--no-verbose', default=False, help='Show debug logging')
def cli(verbose: bool):
    """Livres & Lieux CLI"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

cli.add_command(db)
cli.add_command(book)
cli.add_command(place)
cli.add_command(list_group)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
