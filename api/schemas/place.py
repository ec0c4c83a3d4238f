# api/schemas/place.py
from typing import List
from pydantic import BaseModel, ConfigDict, Field

class PlaceCreate(BaseModel):
    name: str = Field(min_length=1)
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

class Place(BaseModel):
    id: str
    name: str
    lat: float
    lng: float

    model_config = ConfigDict(from_attributes=True)

class PlaceList(BaseModel):
    items: List[Place]

    model_config = ConfigDict(from_attributes=True)
