# -*- coding: utf-8 -*-
"""
data.py
Static data shared by the indexer and its readers:
- Sidecar suffixes of an index bundle
- Nucleotide <-> integer codes (optionally with the '-' bubble symbol)
- IUPAC ambiguity table
- Mismatch-neighbor table for 2-base windows
"""

from types import MappingProxyType

DB_JSON = ".json"
DB_SQLITE3 = ".sqlite3.db"
DB_2BIT = ".2bit"
DB_FASTA = ".fa"
UNI_FASTA = ".unifasta"
BIG_DB = "_BIG_MFE_DB"
BIG_DB_SPLIT_CUTOFF = 1024 ** 3

BASES = frozenset("ATCG")

# index -> symbol; the code of a base is its position here
ANTISENSE_CHARS = ("A", "G", "C", "T", "-")

D2I_BUBBLE = MappingProxyType({c: i for i, c in enumerate(ANTISENSE_CHARS)})
I2D_BUBBLE = MappingProxyType(dict(enumerate(ANTISENSE_CHARS)))
D2I = MappingProxyType({c: i for c, i in D2I_BUBBLE.items() if c != "-"})
I2D = MappingProxyType({i: c for i, c in I2D_BUBBLE.items() if c != "-"})


def base_codes(bubble: bool = False):
    """base -> int; with bubble=True the gap symbol '-' is included."""
    return D2I_BUBBLE if bubble else D2I


def code_bases(bubble: bool = False):
    """int -> base, the reverse of base_codes()."""
    return I2D_BUBBLE if bubble else I2D


IUPAC = MappingProxyType({
    "A": frozenset("A"),
    "C": frozenset("C"),
    "G": frozenset("G"),
    "T": frozenset("T"),
    "U": frozenset("T"),
    "R": frozenset("AG"),
    "Y": frozenset("CT"),
    "S": frozenset("GC"),
    "W": frozenset("AT"),
    "K": frozenset("GT"),
    "M": frozenset("AC"),
    "B": frozenset("CGT"),
    "D": frozenset("AGT"),
    "H": frozenset("ACT"),
    "V": frozenset("ACG"),
    "N": frozenset("ACGT"),
})


def expand_iupac(code: str) -> frozenset:
    """Return the concrete bases an IUPAC code stands for."""
    try:
        return IUPAC[code.upper()]
    except KeyError:
        raise ValueError(f"unknown IUPAC code: {code!r}") from None


# Transitions only (A<->G, C<->T) at either position: these are the
# substitutions that still pair as G·T wobble on the template strand.
MISMATCH = MappingProxyType({
    "AA": frozenset({"GA", "AG"}),
    "AC": frozenset({"GC", "AT"}),
    "AG": frozenset({"GG", "AA"}),
    "AT": frozenset({"GT", "AC"}),
    "CA": frozenset({"TA", "CG"}),
    "CC": frozenset({"TC", "CT"}),
    "CG": frozenset({"TG", "CA"}),
    "CT": frozenset({"TT", "CC"}),
    "GA": frozenset({"AA", "GG"}),
    "GC": frozenset({"AC", "GT"}),
    "GG": frozenset({"AG", "GA"}),
    "GT": frozenset({"AT", "GC"}),
    "TA": frozenset({"CA", "TG"}),
    "TC": frozenset({"CC", "TT"}),
    "TG": frozenset({"CG", "TA"}),
    "TT": frozenset({"CT", "TC"}),
})


def is_near_miss(window: str, other: str) -> bool:
    return other.upper() in MISMATCH.get(window.upper(), ())
