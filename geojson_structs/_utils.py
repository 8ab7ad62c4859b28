import dataclasses

import msgspec


def is_attrs_instance(obj):
    return hasattr(type(obj), "__attrs_attrs__")


def get_field_names(obj):
    """Get the public field names of a struct, dataclass, attrs, or plain object.

    Names are returned in definition order. Names starting with an underscore
    are skipped.
    """
    cls = type(obj)
    if isinstance(obj, msgspec.Struct):
        names = cls.__struct_fields__
    elif dataclasses.is_dataclass(cls):
        names = [f.name for f in dataclasses.fields(cls)]
    elif is_attrs_instance(obj):
        names = [f.name for f in cls.__attrs_attrs__]
    else:
        try:
            names = list(vars(obj))
        except TypeError:
            # No __dict__, fall back to any slots in the mro
            names = []
            for c in reversed(cls.__mro__):
                slots = c.__dict__.get("__slots__", ())
                if isinstance(slots, str):
                    slots = (slots,)
                names.extend(s for s in slots if s not in names)
            names = [n for n in names if hasattr(obj, n)]
        # Include public properties, in definition order
        for c in reversed(cls.__mro__):
            for name, value in vars(c).items():
                if isinstance(value, property) and name not in names:
                    names.append(name)
    return [n for n in names if not n.startswith("_")]
