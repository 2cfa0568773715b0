import pytest

from fizz import expected
from variants import MAX_RECURSION, VARIANTS, chunked, get_variant, jit, recursion, table


@pytest.mark.parametrize("name", sorted(VARIANTS))
def test_variant_matches_reference(name):
    assert list(VARIANTS[name](100)) == expected(100)


@pytest.mark.parametrize("name", sorted(VARIANTS))
@pytest.mark.parametrize("limit", [0, 1, 15, 31])
def test_variant_handles_short_limits(name, limit):
    assert list(VARIANTS[name](limit)) == expected(limit)


@pytest.mark.parametrize("variant", [chunked, jit])
def test_chunk_boundaries(variant):
    # Chunk of 7 does not line up with the period of 15
    assert list(variant(100, chunk=7)) == expected(100)


def test_chunked_handles_long_runs():
    assert list(chunked(20000)) == expected(20000)


def test_recursion_rejects_deep_limits():
    assert recursion(MAX_RECURSION) == expected(MAX_RECURSION)
    with pytest.raises(ValueError, match="recursion"):
        recursion(MAX_RECURSION + 1)


def test_get_variant():
    assert get_variant("shift2") is VARIANTS["shift2"]
    with pytest.raises(ValueError, match="lookup"):
        get_variant("missing")


def test_table_rows():
    rows = list(table(15))

    assert len(rows) == 15
    assert rows[0] == "    1 - 00000001 |   1 - 0001 |  1 - 0001 |  1 - 0001"
    assert rows[4] == "*   5 - 00000101 |   2 - 0010 |  0 - 0000 |  5 - 0101"
    assert rows[14] == "*  15 - 00001111 |   0 - 0000 |  0 - 0000 |  0 - 0000"


def test_table_marks_multiples_of_three_or_five():
    for num, row in enumerate(table(), start=1):
        assert (row[0] == "*") == (num % 3 == 0 or num % 5 == 0)
