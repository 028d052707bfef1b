import pytest

from mfeindex import data
from mfeindex.data import (ANTISENSE_CHARS, BASES, D2I, D2I_BUBBLE, I2D, I2D_BUBBLE, IUPAC,
                           MISMATCH, base_codes, code_bases, expand_iupac, is_near_miss)


def test_codes_round_trip():
    for base in "ATCG":
        assert I2D[D2I[base]] == base
    for code, base in I2D.items():
        assert D2I[base] == code


def test_codes_values():
    assert D2I == {"A": 0, "G": 1, "C": 2, "T": 3}
    assert D2I_BUBBLE["-"] == 4 and I2D_BUBBLE[4] == "-"
    assert [ANTISENSE_CHARS[i] for i in range(5)] == ["A", "G", "C", "T", "-"]


def test_gap_only_in_bubble_variant():
    assert "-" not in base_codes()
    assert 4 not in code_bases()
    assert base_codes(bubble=True) is D2I_BUBBLE
    assert code_bases(bubble=True) is I2D_BUBBLE


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        D2I["N"] = 5
    with pytest.raises(TypeError):
        IUPAC["X"] = frozenset("A")


def test_iupac_values_are_base_subsets():
    for code, bases in IUPAC.items():
        assert bases and bases <= BASES, code
    for base in "ATCG":
        assert IUPAC[base] == {base}
    assert IUPAC["N"] == BASES


def test_expand_iupac():
    assert expand_iupac("r") == {"A", "G"}
    with pytest.raises(ValueError):
        expand_iupac("X")


def test_mismatch_neighbors_differ_by_one_base():
    for window, neighbours in MISMATCH.items():
        assert len(window) == 2
        for other in neighbours:
            assert sum(a != b for a, b in zip(window, other)) == 1


def test_is_near_miss():
    assert is_near_miss("AT", "GT")
    assert is_near_miss("at", "ac")
    assert not is_near_miss("AT", "TT")
    assert not is_near_miss("NN", "AA")


def test_suffixes():
    assert (data.DB_JSON, data.DB_2BIT, data.DB_SQLITE3) == (".json", ".2bit", ".sqlite3.db")
    assert data.BIG_DB_SPLIT_CUTOFF == 1024 ** 3
