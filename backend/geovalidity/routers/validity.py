from geovalidity.core.models import Geometry
from geovalidity.parsers import geojson, wkt
from geovalidity.schemas import requests, responses
from geovalidity.schemas.positions import (
    AtIndex, CoordinatePosition, Exterior, GeometryCollectionPosition, Interior, LinePosition,
    LineStringPosition, MultiLineStringPosition, MultiPointPosition, MultiPolygonPosition, PointPosition,
    PolygonPosition, ProblemPosition, RectPosition, RingRole, TrianglePosition, WholeElement,
)
from geovalidity.validity import explain_invalidity
from fastapi import APIRouter, HTTPException, status
import logging


logger = logging.getLogger(__name__)

api_router = APIRouter(prefix='')


def _to_position(position: ProblemPosition) -> responses.Position:
    match position:
        case PointPosition():
            return responses.Position(type=position.KIND)
        case (
            LinePosition(coordinate=c) | TrianglePosition(coordinate=c) | RectPosition(coordinate=c)
            | LineStringPosition(coordinate=c)
        ):
            return responses.Position(type=position.KIND, **_coordinate_fields(c))
        case MultiPointPosition(geometry=g):
            return responses.Position(type=position.KIND, geometry_index=g.index)
        case MultiLineStringPosition(geometry=g, coordinate=c):
            return responses.Position(type=position.KIND, geometry_index=g.index, **_coordinate_fields(c))
        case PolygonPosition(ring=r, coordinate=c):
            return responses.Position(type=position.KIND, **_ring_fields(r), **_coordinate_fields(c))
        case MultiPolygonPosition(geometry=g, ring=r, coordinate=c):
            return responses.Position(
                type=position.KIND, geometry_index=g.index, **_ring_fields(r), **_coordinate_fields(c),
            )
        case GeometryCollectionPosition(geometry=g, inner=inner):
            return responses.Position(type=position.KIND, geometry_index=g.index, inner=_to_position(inner))
    raise NotImplementedError(f'Unexpected position: {position!r}')

def _ring_fields(ring: RingRole) -> dict:
    match ring:
        case Exterior():
            return {'ring': 'exterior'}
        case Interior(index=index):
            return {'ring': 'interior', 'ring_index': index}
    raise NotImplementedError(f'Unexpected ring: {ring!r}')

def _coordinate_fields(coordinate: CoordinatePosition) -> dict:
    match coordinate:
        case AtIndex(index=index):
            return {'coordinate_index': index}
        case WholeElement():
            return {'whole_element': True}
    raise NotImplementedError(f'Unexpected coordinate position: {coordinate!r}')

def _build_report(geometry: Geometry) -> responses.ValidityReport:
    report = explain_invalidity(geometry)
    if report is None:
        return responses.ValidityReport(is_valid=True, problems=[])

    logger.info('%s is invalid: %d problem(s)', type(geometry).__name__, len(report))
    return responses.ValidityReport(
        is_valid=False,
        problems=[
            responses.ProblemEntry(
                problem=str(finding.problem),
                position=_to_position(finding.position),
                description=f'{finding}.',
            )
            for finding in report
        ],
    )


@api_router.post('/geojson')
async def check_geojson(check: requests.CheckGeoJSON) -> responses.ValidityReport:
    try:
        geometry = geojson.parse_geometry(check.geometry)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, detail=str(e))
    return _build_report(geometry)


@api_router.post('/wkt')
async def check_wkt(check: requests.CheckWKT) -> responses.ValidityReport:
    try:
        geometry = wkt.parse_wkt(check.wkt)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, detail=str(e))
    return _build_report(geometry)
