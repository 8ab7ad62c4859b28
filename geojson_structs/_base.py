import enum

import msgspec

from .crs import UNSPECIFIED, CRSObject


class GeoJSONObjectType(str, enum.Enum):
    """The value of the ``"type"`` member of every typed object."""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    CIRCLE = "Circle"
    FEATURE = "Feature"
    CLUSTER = "Cluster"
    FEATURE_COLLECTION = "FeatureCollection"

    @classmethod
    def lookup(cls, value: str) -> "GeoJSONObjectType":
        """Find a member by its tag, ignoring case.

        Raises ``ValueError`` if ``value`` isn't a known tag.
        """
        try:
            return _BY_LOWER[value.lower()]
        except (KeyError, AttributeError):
            raise ValueError(f"{value!r} is not a valid GeoJSON object type") from None


_BY_LOWER = {m.value.lower(): m for m in GeoJSONObjectType}


class GeoJSONObject(msgspec.Struct, frozen=True, kw_only=True, omit_defaults=True, tag_field="type"):
    """The base class of every typed object.

    Subclasses set a ``tag``; it is written to the ``"type"`` field first when
    encoding and is fixed by the class, so it can't disagree with the object.

    Parameters
    ----------
    crs : CRSObject, optional
        The coordinate reference system. Defaults to an unspecified CRS, which
        is left out when encoding.
    """

    crs: CRSObject = UNSPECIFIED

    def __post_init__(self):
        if self.crs is None:
            msgspec.structs.force_setattr(self, "crs", UNSPECIFIED)
        elif not isinstance(self.crs, CRSObject):
            raise TypeError(f"crs must be a CRSObject, got {type(self.crs).__name__}")

    @property
    def type(self) -> GeoJSONObjectType:
        """The `GeoJSONObjectType` of this object."""
        return GeoJSONObjectType(self.__struct_config__.tag)
