from typing import Any, Union

import msgspec

from ._codec import GeoJSON, _check_encodable, convert, enc_hook

__all__ = ("encode", "decode", "format", "Encoder", "Decoder")


def __dir__():
    return __all__


class Encoder:
    """A JSON encoder for typed objects.

    Parameters
    ----------
    order : {None, 'deterministic', 'sorted'}, optional
        Passed through to `msgspec.json.Encoder`. Defaults to ``None``, which
        writes ``"type"`` first and the remaining fields in definition order.
    """

    __slots__ = ("_encoder",)

    def __init__(self, *, order=None):
        self._encoder = msgspec.json.Encoder(enc_hook=enc_hook, order=order)

    def encode(self, obj: Any) -> bytes:
        """Serialize a typed object (or list of them) as JSON.

        Raises
        ------
        EncodeError
            If ``obj`` isn't a typed object, `Position`, `BoundingBox`,
            `CRSObject`, ``None``, or a list of them, or if a properties bag
            holds a value that can't be encoded.
        """
        _check_encodable(obj)
        try:
            return self._encoder.encode(obj)
        except (NotImplementedError, TypeError) as exc:
            raise msgspec.EncodeError(str(exc)) from None


class Decoder:
    """A JSON decoder for typed objects.

    Parameters
    ----------
    type : type, optional
        What to decode into; see `geojson_structs.convert`. Defaults to
        `GeoJSON`, which accepts any typed object.
    """

    __slots__ = ("type", "_decoder")

    def __init__(self, type: Any = GeoJSON):
        self.type = type
        self._decoder = msgspec.json.Decoder()

    def decode(self, buf: Union[bytes, str]) -> Any:
        """Deserialize JSON into typed objects.

        Raises
        ------
        DecodeError
            If ``buf`` isn't valid JSON.
        ValidationError
            If the JSON doesn't describe an object of the requested type.
        """
        return convert(self._decoder.decode(buf), self.type)


_default_encoder = Encoder()


def encode(obj: Any) -> bytes:
    """Serialize a typed object as JSON.

    Parameters
    ----------
    obj : Any
        A typed object, `Position`, `BoundingBox`, `CRSObject`, ``None``, or
        a list of them.

    Returns
    -------
    data : bytes
        The serialized object.

    See Also
    --------
    decode
    """
    return _default_encoder.encode(obj)


def decode(buf: Union[bytes, str], *, type: Any = GeoJSON) -> Any:
    """Deserialize typed objects from JSON.

    The ``"type"`` member selects the class to decode, ignoring case. Nested
    geometries and features are resolved the same way.

    Parameters
    ----------
    buf : bytes-like or str
        The message to decode.
    type : type, optional
        What to decode into; see `geojson_structs.convert`. Defaults to
        `GeoJSON`, which accepts any typed object.

    Returns
    -------
    obj : Any
        ``None`` for ``null``, a list for an array, or a typed object.

    See Also
    --------
    encode
    """
    return convert(msgspec.json.decode(buf), type)


def format(buf: Union[str, bytes], *, indent: int = 2) -> Union[str, bytes]:
    """Reformat a JSON message; see `msgspec.json.format`."""
    return msgspec.json.format(buf, indent=indent)
