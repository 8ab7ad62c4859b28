import inspect
import logging
import typing
from typing import Any, Dict, List, Optional, Union

import msgspec
from msgspec import EncodeError, ValidationError

from ._base import GeoJSONObject, GeoJSONObjectType
from .bbox import BoundingBox, BoundingBoxType
from .crs import CRSObject, LinkedCRS, NamedCRS, UnspecifiedCRS
from .feature import Cluster, Feature, FeatureCollection, FeatureCollectionItem
from .geometry import (
    Circle,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .position import Position

__all__ = ("GeoJSON", "convert", "to_builtins", "enc_hook", "dec_hook")

logger = logging.getLogger(__name__)

GeoJSON = Union[Geometry, Feature, Cluster, FeatureCollection]

T = GeoJSONObjectType

_GEOMETRY_VIEW = {
    T.POINT: Point,
    T.MULTI_POINT: MultiPoint,
    T.LINE_STRING: LineString,
    T.MULTI_LINE_STRING: MultiLineString,
    T.POLYGON: Polygon,
    T.MULTI_POLYGON: MultiPolygon,
    T.CIRCLE: Circle,
    T.GEOMETRY_COLLECTION: GeometryCollection,
}

_ITEM_VIEW = {T.FEATURE: Feature, T.CLUSTER: Cluster}

_ANY_VIEW = {**_GEOMETRY_VIEW, **_ITEM_VIEW, T.FEATURE_COLLECTION: FeatureCollection}

_VIEWS = {
    GeoJSON: _ANY_VIEW,
    Geometry: _GEOMETRY_VIEW,
    FeatureCollectionItem: _ITEM_VIEW,
}

_VIEW_NAMES = {
    id(_ANY_VIEW): "a GeoJSON object type",
    id(_GEOMETRY_VIEW): "a geometry type",
    id(_ITEM_VIEW): "a feature collection item type",
}


def _kind(obj) -> str:
    if obj is None:
        return "null"
    if isinstance(obj, bool):
        return "bool"
    if isinstance(obj, int):
        return "int"
    if isinstance(obj, float):
        return "float"
    if isinstance(obj, str):
        return "str"
    if isinstance(obj, (list, tuple)):
        return "array"
    if isinstance(obj, dict):
        return "object"
    return type(obj).__name__


def _numbers(obj):
    for x in obj:
        if isinstance(x, bool) or not isinstance(x, (int, float)):
            raise TypeError(f"Expected `float`, got `{_kind(x)}`")
    return [float(x) for x in obj]


###########################################################################
# Custom encodings                                                        #
###########################################################################


def _decode_position(obj) -> Position:
    if obj is None:
        raise TypeError("Coordinates cannot be null")
    if not isinstance(obj, (list, tuple)):
        raise TypeError(f"Expected `array`, got `{_kind(obj)}`")
    if len(obj) not in (2, 3):
        raise ValueError(f"Expected `array` of length 2 to 3, got {len(obj)}")
    return Position(*_numbers(obj))


def _decode_bbox(obj) -> BoundingBox:
    if not isinstance(obj, (list, tuple)):
        raise TypeError(f"Expected `array`, got `{_kind(obj)}`")
    if len(obj) != 4:
        raise ValueError(f"Expected `array` of length 4, got {len(obj)}")
    from_lon, from_lat, to_lon, to_lat = _numbers(obj)
    return BoundingBox(
        BoundingBoxType.BOTTOM_LEFT_TOP_RIGHT,
        Position(from_lon, from_lat),
        Position(to_lon, to_lat),
    )


def _encode_bbox(bbox: BoundingBox) -> list:
    return [bbox.from_.longitude, bbox.from_.latitude, bbox.to.longitude, bbox.to.latitude]


def _decode_crs(obj) -> CRSObject:
    if isinstance(obj, CRSObject):
        return obj
    if obj is None:
        return UnspecifiedCRS()
    if not isinstance(obj, dict):
        raise TypeError(f"Expected `object | null`, got `{_kind(obj)}`")
    kind = obj.get("type")
    props = obj.get("properties")
    if not isinstance(props, dict):
        raise TypeError(f"Expected CRS `properties` to be an `object`, got `{_kind(props)}`")
    if kind == "name":
        return NamedCRS(props.get("name"))
    elif kind == "link":
        return LinkedCRS(props.get("href"), props.get("type"))
    raise ValueError(f"Invalid CRS type {kind!r}")


def _encode_crs(crs: CRSObject):
    if isinstance(crs, UnspecifiedCRS):
        return None
    return {"type": crs.type.value, "properties": crs.properties}


def enc_hook(obj: Any) -> Any:
    """Encode the types msgspec doesn't support natively."""
    if isinstance(obj, Position):
        return list(obj)
    elif isinstance(obj, BoundingBox):
        return _encode_bbox(obj)
    elif isinstance(obj, CRSObject):
        return _encode_crs(obj)
    raise NotImplementedError(f"Encoding objects of type {type(obj).__name__} is unsupported")


def _custom_decoder(type):
    if type is Position:
        return _decode_position
    elif type is BoundingBox:
        return _decode_bbox
    elif inspect.isclass(type) and issubclass(type, CRSObject):
        return _decode_crs
    return None


def dec_hook(type: Any, obj: Any) -> Any:
    """Decode the types msgspec doesn't support natively.

    Malformed values raise ``TypeError`` or ``ValueError``, which msgspec
    reports as a `ValidationError` at the offending path.
    """
    decoder = _custom_decoder(type)
    if decoder is None:
        raise NotImplementedError(f"Decoding objects of type {type!r} is unsupported")
    return decoder(obj)


###########################################################################
# Dispatch                                                                #
###########################################################################


def _read_tag(node: Dict[str, Any], view, path: str):
    if "type" in node:
        key = "type"
    else:
        key = next(
            (k for k in node if isinstance(k, str) and k.lower() == "type"), None
        )
        if key is None:
            raise ValidationError(f"Object missing required field `type` - at `{path}`")
    value = node[key]
    if not isinstance(value, str):
        raise ValidationError(f"Expected `str`, got `{_kind(value)}` - at `{path}.{key}`")
    try:
        tag = GeoJSONObjectType.lookup(value)
    except ValueError:
        raise ValidationError(f"Invalid value {value!r} - at `{path}.{key}`") from None
    if tag not in view:
        raise ValidationError(
            f"`{tag.value}` is not {_VIEW_NAMES.get(id(view), 'allowed here')} "
            f"- at `{path}.{key}`"
        )
    return key, tag


def _normalize(node: Any, view, path: str) -> Dict[str, Any]:
    """Validate and canonicalize the ``"type"`` of a typed object and its
    nested typed objects, returning a new tree msgspec can convert."""
    if not isinstance(node, dict):
        raise ValidationError(f"Expected `object`, got `{_kind(node)}` - at `{path}`")
    key, tag = _read_tag(node, view, path)
    out = {"type": tag.value}
    out.update((k, v) for k, v in node.items() if k != key)
    if "crs" in out and out["crs"] is None:
        out["crs"] = UnspecifiedCRS()

    if tag in (T.FEATURE, T.CLUSTER):
        geometry = out.get("geometry")
        if geometry is not None:
            out["geometry"] = _normalize(geometry, _GEOMETRY_VIEW, f"{path}.geometry")
    elif tag is T.GEOMETRY_COLLECTION:
        out["geometries"] = _normalize_many(
            out.get("geometries"), _GEOMETRY_VIEW, f"{path}.geometries"
        )
    elif tag is T.FEATURE_COLLECTION:
        out["features"] = _normalize_many(
            out.get("features"), _ITEM_VIEW, f"{path}.features"
        )
    return out


def _normalize_many(nodes, view, path):
    if nodes is None:
        raise ValidationError(f"Expected `array`, got `null` - at `{path}`")
    if not isinstance(nodes, (list, tuple)):
        raise ValidationError(f"Expected `array`, got `{_kind(nodes)}` - at `{path}`")
    return [_normalize(n, view, f"{path}[{i}]") for i, n in enumerate(nodes)]


def _view_for(type):
    try:
        view = _VIEWS.get(type)
    except TypeError:
        view = None
    if view is not None:
        return view
    cls = typing.get_origin(type) or type
    if inspect.isclass(cls) and issubclass(cls, GeoJSONObject):
        tag = cls.__struct_config__.tag
        if tag is not None:
            return {GeoJSONObjectType(tag): type}
    return None


def _dispatch(obj, view):
    if obj is None:
        return None
    target = Union[tuple(view.values())]
    if isinstance(obj, (list, tuple)):
        nodes = [
            None if o is None else _normalize(o, view, f"$[{i}]")
            for i, o in enumerate(obj)
        ]
        target = List[Optional[target]]
    elif isinstance(obj, dict):
        nodes = _normalize(obj, view, "$")
    else:
        raise ValidationError(
            f"Expected `object`, `array`, or `null`, got `{_kind(obj)}`"
        )
    logger.debug("Converting to %r", target)
    return msgspec.convert(nodes, type=target, dec_hook=dec_hook)


def convert(obj: Any, type: Any = GeoJSON) -> Any:
    """Convert a tree of builtin objects into typed objects.

    Parameters
    ----------
    obj : Any
        A tree of builtin types (``dict``, ``list``, ``str``, ``int``,
        ``float``, ``bool``, ``None``), as returned by a JSON parser.
    type : type, optional
        What to convert to. One of:

        - `GeoJSON` (the default): any typed object.
        - `Geometry`: only geometry objects.
        - `FeatureCollectionItem`: only `Feature` and `Cluster` objects.
        - A typed object class (``Point``, ``GenericFeature[...]``, ...):
          only that type.
        - `Position`, `BoundingBox`, or `CRSObject`.

    Returns
    -------
    obj : Any
        For typed objects, ``None`` if ``obj`` is ``None``, a list if ``obj``
        is a list, or a single typed object.

    Raises
    ------
    ValidationError
        If ``obj`` is missing a ``"type"``, the ``"type"`` is unknown or not
        allowed, or any field is invalid.
    """
    view = _view_for(type)
    if view is not None:
        return _dispatch(obj, view)
    decoder = _custom_decoder(type)
    if decoder is None:
        raise TypeError(f"Converting to {type!r} is unsupported")
    try:
        return decoder(obj)
    except (TypeError, ValueError) as exc:
        raise ValidationError(str(exc)) from None


_ENCODABLE = (GeoJSONObject, Position, BoundingBox, CRSObject)


def _check_encodable(obj):
    if isinstance(obj, (list, tuple)):
        for o in obj:
            _check_encodable(o)
    elif obj is not None and not isinstance(obj, _ENCODABLE):
        raise EncodeError(f"Encoding objects of type {type(obj).__name__} is unsupported")


def to_builtins(obj: Any) -> Any:
    """Convert typed objects into a tree of builtin objects.

    Parameters
    ----------
    obj : Any
        A typed object, `Position`, `BoundingBox`, `CRSObject`, or a list of
        them.

    Returns
    -------
    obj : Any
        The same tree, composed only of builtin types.

    Raises
    ------
    EncodeError
        If ``obj`` (or a value nested in a properties bag) isn't supported.
    """
    _check_encodable(obj)
    try:
        return msgspec.to_builtins(obj, enc_hook=enc_hook)
    except (NotImplementedError, TypeError) as exc:
        raise EncodeError(str(exc)) from None
