import click
from typing import Optional
from core.services.catalog_service import CatalogService
from core.services.proximity import ProximityResolver, bounding_box
from ..utils import open_session, handle_errors, format_place

@click.group()
def place():
    """Place commands"""
    pass

@place.command()
@click.argument('name')
@click.option('--lat', type=float, required=True, help='Latitude in degrees')
@click.option('--lng', type=float, required=True, help='Longitude in degrees')
@handle_errors
def add(name: str, lat: float, lng: float):
    """Add a place to the catalog"""
    with open_session() as session:
        created = CatalogService(session).create_place(name, lat, lng)
        click.echo(click.style("Created place: ", fg='green') + format_place(created))

@place.command()
@click.option('--lat', type=float, required=True, help='Latitude in degrees')
@click.option('--lng', type=float, required=True, help='Longitude in degrees')
@click.option('--radius', type=float, default=None, help='Radius in meters (default 5000)')
@click.option('--verbose/--no-verbose', default=False, help='Show the search box')
@handle_errors
def near(lat: float, lng: float, radius: Optional[float], verbose: bool):
    """Find places near a point

    Example:
        livres-lieux place near --lat 48.85 --lng 2.35 --radius 2000
    """
    if verbose:
        box = bounding_box(lat, lng, radius)
        lng_range = "any" if box.lng_unbounded else f"{box.lng_min:.5f}..{box.lng_max:.5f}"
        click.echo(click.style(
            f"Box: lat {box.lat_min:.5f}..{box.lat_max:.5f}, lng {lng_range}", fg='blue'
        ))

    with open_session() as session:
        places = ProximityResolver(session).find_near(lat, lng, radius)
        if not places:
            click.echo(click.style("No places found", fg='yellow'))
            return
        click.echo(click.style(f"Found {len(places)} places", fg='blue'))
        for found in places:
            click.echo(format_place(found))
