from typing import Literal
from pydantic import BaseModel

# Extra dimensions are accepted and ignored by the validators
COORDINATES_TYPE = tuple[float, float] | tuple[float, float, float]

# ----- Geometry Types -----
class Point(BaseModel):
    type: Literal["Point"]
    coordinates: COORDINATES_TYPE

class MultiPoint(BaseModel):
    type: Literal["MultiPoint"]
    coordinates: list[COORDINATES_TYPE]

class LineString(BaseModel):
    type: Literal["LineString"]
    coordinates: list[COORDINATES_TYPE]

class MultiLineString(BaseModel):
    type: Literal["MultiLineString"]
    coordinates: list[list[COORDINATES_TYPE]]

class Polygon(BaseModel):
    type: Literal["Polygon"]
    # Rings are neither closed nor counted here, that is the validators' job
    coordinates: list[list[COORDINATES_TYPE]]

class MultiPolygon(BaseModel):
    type: Literal["MultiPolygon"]
    coordinates: list[list[list[COORDINATES_TYPE]]]

Geometry = Point | MultiPoint | LineString | MultiLineString | Polygon | MultiPolygon

class GeometryCollection(BaseModel):
    type: Literal["GeometryCollection"]
    geometries: list['Geometry | GeometryCollection']

GeometryCollection.model_rebuild()
