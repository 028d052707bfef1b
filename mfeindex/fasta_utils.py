# -*- coding: utf-8 -*-
import gzip
from typing import Iterator, NamedTuple

from Bio import SeqIO


class FastaEntry(NamedTuple):
    entry_name: str
    desc: str
    seq: str

    @property
    def size(self) -> int:
        return len(self.seq)


def open_auto(path):
    if str(path).endswith(".gz"):
        return gzip.open(path, "rt", encoding="utf-8", errors="ignore")
    return open(path, "r", encoding="utf-8", errors="ignore")

def split_description(record_id: str, description: str) -> str:
    """Biopython keeps the id at the front of .description; drop it."""
    parts = description.split(None, 1)
    if parts and parts[0] == record_id:
        return parts[1].strip() if len(parts) > 1 else ""
    return description.strip()

def iter_fasta_entries(path) -> Iterator[FastaEntry]:
    """yield FastaEntry in file order; sequence text is kept as written (case preserved)."""
    with open_auto(path) as fh:
        for rec in SeqIO.parse(fh, "fasta"):
            yield FastaEntry(rec.id, split_description(rec.id, rec.description), str(rec.seq))

def write_fasta_record(fo, header, seq, wrap=0):
    fo.write(">" + str(header) + "\n")
    if wrap and wrap > 0:
        for i in range(0, len(seq), wrap):
            fo.write(seq[i:i+wrap] + "\n")
    else:
        fo.write(seq + "\n")
