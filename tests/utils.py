def assert_eq_and_hash(a, b):
    """Check that ``a`` and ``b`` are equal both ways and hash the same"""
    assert a == b
    assert b == a
    assert not (a != b)
    assert hash(a) == hash(b)


def assert_not_equal(a, b):
    assert a != b
    assert b != a
    assert not (a == b)
