import enum
import re
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

__all__ = ("CRSType", "CRSObject", "UnspecifiedCRS", "NamedCRS", "LinkedCRS")


def __dir__():
    return __all__


class CRSType(enum.Enum):
    """The kind of a coordinate reference system object."""

    UNSPECIFIED = "unspecified"
    NAME = "name"
    LINK = "link"


# Characters allowed anywhere in an RFC 3986 URI reference
_URI_RE = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+\Z")
_PCT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _is_dereferenceable(href: str) -> bool:
    if not _URI_RE.match(href) or _PCT_RE.search(href):
        return False
    try:
        parts = urlsplit(href)
        # Accessing port validates it
        parts.port
    except ValueError:
        return False
    return True


class CRSObject:
    """Base class for coordinate reference system objects.

    Two CRS objects are equal if they're the same kind and have equal
    properties.
    """

    __slots__ = ()

    type: CRSType

    @property
    def properties(self) -> Dict[str, Any]:
        """The CRS members written under ``"properties"``."""
        return {}

    def __eq__(self, other):
        if not isinstance(other, CRSObject):
            return NotImplemented
        return self.type is other.type and self.properties == other.properties

    def __hash__(self):
        return hash((self.type, tuple(self.properties.items())))

    def __setattr__(self, name, value):
        raise AttributeError(f"immutable type: {type(self).__name__!r}")


class UnspecifiedCRS(CRSObject):
    """A CRS that is explicitly not specified. Encoded as ``null``."""

    __slots__ = ()

    type = CRSType.UNSPECIFIED

    def __repr__(self):
        return "UnspecifiedCRS()"


class NamedCRS(CRSObject):
    """A CRS identified by name (e.g. ``"urn:ogc:def:crs:OGC:1.3:CRS84"``).

    Parameters
    ----------
    name : str
        The CRS name. Must be non-empty.
    """

    __slots__ = ("name",)

    type = CRSType.NAME

    def __init__(self, name: str):
        if name is None:
            raise TypeError("name must not be None")
        if not isinstance(name, str):
            raise TypeError(f"name must be a str, got {type(name).__name__}")
        if not name:
            raise ValueError("name must not be empty")
        object.__setattr__(self, "name", name)

    @property
    def properties(self) -> Dict[str, Any]:
        return {"name": self.name}

    def __repr__(self):
        return f"NamedCRS({self.name!r})"


class LinkedCRS(CRSObject):
    """A CRS referenced by a link.

    Parameters
    ----------
    href : str
        An absolute or relative URI pointing at the CRS definition. It is kept
        exactly as given.
    link_type : str, optional
        A hint describing the format of the linked definition (e.g.
        ``"proj4"`` or ``"ogcwkt"``).
    """

    __slots__ = ("href", "link_type")

    type = CRSType.LINK

    def __init__(self, href: str, link_type: Optional[str] = None):
        if href is None:
            raise TypeError("href must not be None")
        if not isinstance(href, str):
            raise TypeError(f"href must be a str, got {type(href).__name__}")
        if not href:
            raise ValueError("href must not be empty")
        if not _is_dereferenceable(href):
            raise ValueError(f"href must be a dereferenceable URI, got {href!r}")
        object.__setattr__(self, "href", href)
        object.__setattr__(self, "link_type", link_type)

    @property
    def properties(self) -> Dict[str, Any]:
        out = {"href": self.href}
        if self.link_type is not None:
            out["type"] = self.link_type
        return out

    def __repr__(self):
        if self.link_type is None:
            return f"LinkedCRS({self.href!r})"
        return f"LinkedCRS({self.href!r}, link_type={self.link_type!r})"


#: The shared default for every object without an explicit CRS
UNSPECIFIED = UnspecifiedCRS()
