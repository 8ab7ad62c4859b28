from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar, Union

import msgspec

from ._base import GeoJSONObject
from ._utils import get_field_names
from .bbox import BoundingBox
from .geometry import Geometry, _GEOMETRY_TYPES

__all__ = (
    "GenericFeature",
    "Feature",
    "GenericCluster",
    "Cluster",
    "FeatureCollection",
    "FeatureCollectionItem",
    "bind_properties",
)


def __dir__():
    return __all__


GeometryT = TypeVar("GeometryT")
PropertiesT = TypeVar("PropertiesT")
OptionsT = TypeVar("OptionsT")


def bind_properties(source: Any) -> Dict[str, Any]:
    """Build a properties dict from an arbitrary object.

    - ``None`` results in a new empty dict.
    - Mappings are returned as is, without copying.
    - `msgspec.Struct`, dataclass, and attrs instances contribute their fields.
    - Any other object contributes its public attributes and properties.

    Values are stored as is; nested objects aren't converted.

    Parameters
    ----------
    source : Any
        The object to read.

    Returns
    -------
    properties : dict
    """
    if source is None:
        return {}
    if isinstance(source, Mapping):
        return source
    return {name: getattr(source, name) for name in get_field_names(source)}


def _check_geometry(geometry):
    if geometry is not None and not isinstance(geometry, _GEOMETRY_TYPES):
        raise TypeError(
            f"geometry must be a geometry object or None, got {type(geometry).__name__}"
        )


def _check_bag(obj, name):
    value = getattr(obj, name)
    if value is None:
        msgspec.structs.force_setattr(obj, name, {})
    elif not isinstance(value, Mapping):
        raise TypeError(
            f"{name} must be a mapping or None, got {type(value).__name__}. "
            f"Use `{type(obj).__name__}.from_object` to bind an arbitrary object."
        )


class GenericFeature(GeoJSONObject, Generic[GeometryT, PropertiesT, OptionsT], tag="Feature"):
    """A feature with statically typed geometry, properties, and options.

    Two ``GenericFeature`` objects are equal only if every field (``id``,
    ``geometry``, ``properties``, ``options``, ``crs``) is equal. For a feature
    where only the geometry matters, use `Feature`.

    Parameters
    ----------
    geometry : Geometry or None
        The feature geometry.
    properties : Any
        The feature properties, any type msgspec can encode.
    options : Any
        Display options for the feature.
    id : str, optional
        An optional identifier. Not encoded if ``None``.
    """

    geometry: Optional[GeometryT]
    properties: Optional[PropertiesT]
    options: Optional[OptionsT]
    id: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        _check_geometry(self.geometry)

    def __hash__(self):
        return hash((self.__struct_config__.tag, self.id, self.geometry, self.crs))


class Feature(GenericFeature[Geometry, Dict[str, Any], Dict[str, Any]], tag="Feature"):
    """A feature with any geometry and dict ``properties``/``options``.

    ``properties`` and ``options`` default to new empty dicts.

    Notes
    -----
    Equality and hashing only consider the ``geometry``: two features with
    equal geometries are equal even if their ``id``, ``properties``, or
    ``options`` differ. Use `GenericFeature` for full structural equality.
    """

    properties: Optional[Dict[str, Any]] = None
    options: Optional[Dict[str, Any]] = None
    id: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        _check_bag(self, "properties")
        _check_bag(self, "options")

    @classmethod
    def from_object(
        cls,
        geometry: Optional[Geometry],
        properties: Any = None,
        options: Any = None,
        id: Optional[str] = None,
        *,
        binder: Callable[[Any], Dict[str, Any]] = bind_properties,
        **kwargs,
    ) -> "Feature":
        """Create a feature, binding ``properties`` and ``options`` through ``binder``.

        Parameters
        ----------
        geometry : Geometry or None
            The feature geometry.
        properties, options : Any
            Objects to convert to dicts.
        id : str, optional
            An optional identifier.
        binder : callable, optional
            Converts each of ``properties`` and ``options`` to a dict.
            Defaults to `bind_properties`.
        **kwargs
            Any other fields (e.g. ``crs``).
        """
        return cls(
            geometry, binder(properties), binder(options), id, **kwargs
        )

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.geometry == other.geometry

    def __ne__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.geometry != other.geometry

    def __hash__(self):
        return hash(self.geometry)


class GenericCluster(GeoJSONObject, Generic[GeometryT, PropertiesT, OptionsT], tag="Cluster"):
    """A cluster of features, with statically typed properties and options.

    Like `GenericFeature`, with the number of clustered features and the box
    bounding them. Equal only if every field is equal.

    The hash includes ``bounding_box``, which `BoundingBox.convert_to` mutates
    in place. Converting the box of a cluster that is stored in a set or used
    as a dict key changes its hash.

    Parameters
    ----------
    geometry : Geometry or None
        The cluster geometry.
    number : int
        The number of features in the cluster.
    bounding_box : BoundingBox
        The bounds of the cluster. Encoded as ``"bbox"``.
    properties : Any
        The cluster properties.
    options : Any
        Display options for the cluster.
    id : str, optional
        An optional identifier. Not encoded if ``None``.
    """

    geometry: Optional[GeometryT]
    number: int
    bounding_box: BoundingBox = msgspec.field(name="bbox")
    properties: Optional[PropertiesT]
    options: Optional[OptionsT]
    id: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        _check_geometry(self.geometry)
        if self.bounding_box is None:
            raise TypeError("bounding_box must not be None")
        if not isinstance(self.bounding_box, BoundingBox):
            raise TypeError(
                f"bounding_box must be a BoundingBox, got {type(self.bounding_box).__name__}"
            )

    def __hash__(self):
        return hash(
            (
                self.__struct_config__.tag,
                self.id,
                self.geometry,
                self.number,
                self.bounding_box,
                self.crs,
            )
        )


class Cluster(GenericCluster[Geometry, Dict[str, Any], Dict[str, Any]], tag="Cluster"):
    """A cluster with any geometry and dict ``properties``/``options``.

    Notes
    -----
    As with `Feature`, equality and hashing only consider the ``geometry``.
    """

    properties: Optional[Dict[str, Any]] = None
    options: Optional[Dict[str, Any]] = None
    id: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        _check_bag(self, "properties")
        _check_bag(self, "options")

    @classmethod
    def from_object(
        cls,
        geometry: Optional[Geometry],
        number: int,
        bounding_box: BoundingBox,
        properties: Any = None,
        options: Any = None,
        id: Optional[str] = None,
        *,
        binder: Callable[[Any], Dict[str, Any]] = bind_properties,
        **kwargs,
    ) -> "Cluster":
        """Create a cluster, binding ``properties`` and ``options`` through ``binder``.

        See `Feature.from_object` for details.
        """
        return cls(
            geometry,
            number,
            bounding_box,
            binder(properties),
            binder(options),
            id,
            **kwargs,
        )

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.geometry == other.geometry

    def __ne__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.geometry != other.geometry

    def __hash__(self):
        return hash(self.geometry)


FeatureCollectionItem = Union[Feature, Cluster]


class FeatureCollection(GeoJSONObject, tag="FeatureCollection"):
    """An ordered collection of features and clusters.

    ``features`` is a plain list that may be appended to after construction.
    It isn't synchronized; guard it externally if shared between threads.

    Parameters
    ----------
    features : list
        The `Feature` and `Cluster` items. Must not be ``None``.
    """

    features: List[FeatureCollectionItem]

    def __post_init__(self):
        super().__post_init__()
        if self.features is None:
            raise TypeError("features must not be None")
        if not isinstance(self.features, list):
            msgspec.structs.force_setattr(self, "features", list(self.features))
        for feature in self.features:
            if not isinstance(feature, (GenericFeature, GenericCluster)):
                raise TypeError(
                    "FeatureCollection items must be features or clusters, "
                    f"got {type(feature).__name__}"
                )

    def __hash__(self):
        out = hash((self.__struct_config__.tag, self.crs))
        for feature in self.features:
            out = hash((out, feature))
        return out
