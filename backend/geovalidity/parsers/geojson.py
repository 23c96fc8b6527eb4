from geovalidity.core.models import (
    Geometry, GeometryCollection, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon,
)
from pydantic import BaseModel
from typing import Any, Callable


def parse_geometry(geojson: dict[str, Any] | BaseModel) -> Geometry:
    if isinstance(geojson, BaseModel):
        geojson = geojson.model_dump()
    if not isinstance(geojson, dict):
        raise ValueError(f'GeoJSON geometry must be an object, got {type(geojson).__name__}')

    geometry_type = geojson.get('type')
    parser = _PARSERS.get(geometry_type)
    if parser is None:
        raise ValueError(f'Unsupported GeoJSON geometry type: {geometry_type!r}')

    try:
        return parser(geojson)
    except (KeyError, IndexError, TypeError) as e:
        raise ValueError(f'Malformed GeoJSON {geometry_type}: {e}') from e

def _read_point(coordinates) -> Point:
    return Point(float(coordinates[0]), float(coordinates[1]))

def _read_polygon(rings) -> Polygon:
    if len(rings) == 0:
        raise ValueError('Polygon without exterior ring')
    return Polygon(LineString(rings[0]), tuple(LineString(ring) for ring in rings[1:]))

def _parse_point(geojson: dict[str, Any]) -> Point:
    return _read_point(geojson['coordinates'])

def _parse_multi_point(geojson: dict[str, Any]) -> MultiPoint:
    return MultiPoint(tuple(_read_point(c) for c in geojson['coordinates']))

def _parse_line_string(geojson: dict[str, Any]) -> LineString:
    return LineString(geojson['coordinates'])

def _parse_multi_line_string(geojson: dict[str, Any]) -> MultiLineString:
    return MultiLineString(tuple(LineString(line) for line in geojson['coordinates']))

def _parse_polygon(geojson: dict[str, Any]) -> Polygon:
    return _read_polygon(geojson['coordinates'])

def _parse_multi_polygon(geojson: dict[str, Any]) -> MultiPolygon:
    return MultiPolygon(tuple(_read_polygon(rings) for rings in geojson['coordinates']))

def _parse_geometry_collection(geojson: dict[str, Any]) -> GeometryCollection:
    return GeometryCollection(tuple(parse_geometry(g) for g in geojson['geometries']))


_PARSERS: dict[str, Callable[[dict[str, Any]], Geometry]] = {
    'Point': _parse_point,
    'MultiPoint': _parse_multi_point,
    'LineString': _parse_line_string,
    'MultiLineString': _parse_multi_line_string,
    'Polygon': _parse_polygon,
    'MultiPolygon': _parse_multi_polygon,
    'GeometryCollection': _parse_geometry_collection,
}
