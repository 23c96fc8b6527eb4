from geovalidity.core.models import (
    Geometry, GeometryCollection, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon,
)
from shapely import wkt
from shapely.errors import GEOSException
import shapely


def parse_wkt(text: str) -> Geometry:
    try:
        geometry = wkt.loads(text)
    except GEOSException as e:
        raise ValueError(f'Invalid WKT: {e}') from e
    return from_shapely(geometry)

def from_shapely(geometry: shapely.Geometry) -> Geometry:
    geom_type = geometry.geom_type
    if geom_type == 'Point':
        if geometry.is_empty:
            raise ValueError('Empty points cannot be validated')
        return Point(geometry.x, geometry.y)
    elif geom_type in ('LineString', 'LinearRing'):
        return LineString(tuple(geometry.coords))
    elif geom_type == 'Polygon':
        return Polygon(
            LineString(tuple(geometry.exterior.coords)),
            tuple(LineString(tuple(interior.coords)) for interior in geometry.interiors),
        )
    elif geom_type == 'MultiPoint':
        return MultiPoint(tuple(from_shapely(geom) for geom in geometry.geoms))
    elif geom_type == 'MultiLineString':
        return MultiLineString(tuple(from_shapely(geom) for geom in geometry.geoms))
    elif geom_type == 'MultiPolygon':
        return MultiPolygon(tuple(from_shapely(geom) for geom in geometry.geoms))
    elif geom_type == 'GeometryCollection':
        return GeometryCollection(tuple(from_shapely(geom) for geom in geometry.geoms))
    raise ValueError(f'Unsupported geometry type: {geom_type}')
