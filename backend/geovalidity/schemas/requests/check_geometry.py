from geovalidity.schemas.requests.geojson import Geometry, GeometryCollection
from pydantic import BaseModel, Field


class CheckGeoJSON(BaseModel):
    geometry: Geometry | GeometryCollection


class CheckWKT(BaseModel):
    wkt: str = Field(..., min_length=1, description="Geometry as Well-Known Text")
