from geovalidity.schemas.requests.check_geometry import CheckGeoJSON, CheckWKT
from geovalidity.schemas.requests.geojson import (
    Geometry, GeometryCollection, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon,
)
