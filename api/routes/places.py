# api/routes/places.py

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.services.catalog_service import CatalogService
from core.services.proximity import ProximityResolver
from api.schemas.place import Place, PlaceCreate, PlaceList

router = APIRouter(prefix="/places", tags=["places"])

@router.get("/near", response_model=PlaceList)
def get_places_near(
    lat: float = Query(..., ge=-90, le=90, description="Latitude of the search point"),
    lng: float = Query(..., ge=-180, le=180, description="Longitude of the search point"),
    radius: Optional[float] = Query(None, description="Search radius in meters (default 5000)"),
    db: Session = Depends(get_db)
):
    """
    Get up to 200 places inside the bounding box around a point.
    
    Args:
        lat: Latitude in degrees
        lng: Longitude in degrees
        radius: Radius in meters; negative values are treated as 0
        db: Database session
    
    Returns:
        PlaceList in catalog order
    """
    places = ProximityResolver(db).find_near(lat, lng, radius)
    return {"items": places}

@router.post("", response_model=Place, status_code=status.HTTP_201_CREATED)
def create_place(place: PlaceCreate, db: Session = Depends(get_db)):
    return CatalogService(db).create_place(place.name, place.lat, place.lng)

@router.get("/{place_id}", response_model=Place)
def get_place(place_id: str, db: Session = Depends(get_db)):
    return CatalogService(db).get_place(place_id)
