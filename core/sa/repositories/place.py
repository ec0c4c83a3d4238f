# core/sa/repositories/place.py
from typing import Optional, List
from sqlalchemy.orm import Session
from ..models import Place

class PlaceRepository:
    """Repository for managing Place entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.
        
        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_by_id(self, place_id: str) -> Optional[Place]:
        """Get a place by its ID.
        
        Args:
            place_id: The ID of the place to retrieve
            
        Returns:
            The Place object if found, None otherwise
        """
        return self.session.get(Place, place_id)

    def find_in_box(
        self,
        lat_min: float,
        lat_max: float,
        lng_min: Optional[float],
        lng_max: Optional[float],
        limit: int
    ) -> List[Place]:
        """Get places whose coordinates fall inside a bounding box.
        
        Both ranges are inclusive at each end.
        
        Args:
            lat_min: Lowest latitude to include
            lat_max: Highest latitude to include
            lng_min: Lowest longitude to include, None for no longitude filter
            lng_max: Highest longitude to include, None for no longitude filter
            limit: Maximum number of results to return
            
        Returns:
            List of Place objects in storage order
        """
        query = self.session.query(Place).filter(
            Place.lat >= lat_min,
            Place.lat <= lat_max
        )

        if lng_min is not None:
            query = query.filter(Place.lng >= lng_min)
        if lng_max is not None:
            query = query.filter(Place.lng <= lng_max)

        return query.limit(limit).all()

    def insert_place(self, name: str, lat: float, lng: float) -> Place:
        """Add a new place to the session and flush it so its ID is assigned.
        
        Args:
            name: Display name of the place
            lat: Latitude in degrees
            lng: Longitude in degrees
            
        Returns:
            The new Place object
        """
        place = Place(name=name, lat=lat, lng=lng)
        self.session.add(place)
        self.session.flush()
        return place
