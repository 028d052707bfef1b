# -*- coding: utf-8 -*-
"""
indexer.py
Build the index bundle next to a FASTA file:
  <fasta>.json        per-record metadata keyed by sequential id
  <fasta>.2bit        faToTwoBit output of the renumbered FASTA
  <fasta>.sqlite3.db  k-mer index written by the external indexer

Calls against the same FASTA must not run concurrently: they share the
sidecar paths and the .unifasta temp file.
"""
from __future__ import annotations
import os, json, time
from typing import NamedTuple, Optional

import pandas as pd
from tqdm import tqdm

from .data import DB_JSON, DB_SQLITE3, DB_2BIT, DB_FASTA, UNI_FASTA, BIG_DB, BIG_DB_SPLIT_CUTOFF
from .external import (SubprocessRunner, find_tool, fa_to_two_bit, build_kmer_index,
                       FATOTWOBIT, FATOTWOBIT_ENV, INDEXER, INDEXER_ENV)
from .fasta_utils import iter_fasta_entries, write_fasta_record
from .util import log, warn, remove_quietly, count_fasta_records


class SourceNotFound(FileNotFoundError):
    pass


class BundlePaths(NamedTuple):
    source: str
    json: str
    twobit: str
    sqlite: str
    fasta: str
    unifasta: str


class IndexReport(NamedTuple):
    source: str
    records: int
    k: int
    paths: BundlePaths
    seconds: float


def bundle_paths(fasta_file) -> BundlePaths:
    p = str(fasta_file)
    return BundlePaths(p, p + DB_JSON, p + DB_2BIT, p + DB_SQLITE3, p + DB_FASTA, p + UNI_FASTA)

def big_db_dir(fasta_file) -> str:
    return str(fasta_file) + BIG_DB

def is_big_db(fasta_file) -> bool:
    return os.path.getsize(fasta_file) > BIG_DB_SPLIT_CUTOFF

def db_indexed(fasta_file) -> bool:
    p = bundle_paths(fasta_file)
    return os.path.exists(p.sqlite) and os.path.exists(p.json) and os.path.exists(p.twobit)


def write_unifasta(fasta_file, uni_fasta, json_file, progress: bool = True) -> int:
    """
    Renumber records 0..n-1 into uni_fasta and dump {id, desc, size} per record to json_file.
    Return the number of records.
    """
    info_json = {}
    total = count_fasta_records(fasta_file) if progress else None
    bar = tqdm(total=total, desc=f"[unifasta] {os.path.basename(str(fasta_file))}",
               unit="rec", mininterval=0.2, disable=not progress)
    with open(uni_fasta, "w", encoding="utf-8") as fh:
        for index, entry in enumerate(iter_fasta_entries(fasta_file)):
            info_json[str(index)] = {"id": entry.entry_name, "desc": entry.desc, "size": entry.size}
            write_fasta_record(fh, index, entry.seq)
            bar.update(1)
    bar.close()

    with open(json_file, "w", encoding="utf-8") as fh:
        json.dump(info_json, fh)
    return len(info_json)


def ensure_index(source_path, k: int = 9, force_reindex: bool = False,
                 runner=None, fatotwobit: Optional[str] = None, indexer: Optional[str] = None,
                 progress: bool = True) -> Optional[IndexReport]:
    """
    Make sure the index bundle of source_path exists; build it when missing or forced.
    Return None when nothing had to be done, else an IndexReport.

    :params runner: object with run(cmd) -> exit code; defaults to SubprocessRunner.
    :params fatotwobit / indexer: executables; looked up in the environment and $PATH
        when not given.
    """
    if not force_reindex and db_indexed(source_path):
        return None

    if not os.path.isfile(source_path):
        raise SourceNotFound(f"{source_path} does not exist.")
    if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
        raise ValueError(f"k must be a positive integer, got {k!r}")

    if runner is None:
        runner = SubprocessRunner(logger=log)
        fatotwobit = find_tool(FATOTWOBIT, FATOTWOBIT_ENV, fatotwobit)
        indexer = find_tool(INDEXER, INDEXER_ENV, indexer)
    else:
        fatotwobit = fatotwobit or os.getenv(FATOTWOBIT_ENV) or FATOTWOBIT
        indexer = indexer or os.getenv(INDEXER_ENV) or INDEXER

    paths = bundle_paths(source_path)
    t0 = time.time()
    log(f"Begin index database: {source_path}")
    try:
        if force_reindex:
            # the indexer may append to an existing database
            for p in (paths.json, paths.twobit, paths.sqlite):
                remove_quietly(p)
        n = write_unifasta(source_path, paths.unifasta, paths.json, progress=progress)
        fa_to_two_bit(runner, fatotwobit, paths.unifasta, paths.twobit)
        build_kmer_index(runner, indexer, paths.unifasta, k, paths.sqlite)
    except BaseException:
        # leave no partial bundle behind, Ctrl-C included
        for p in (paths.json, paths.twobit, paths.sqlite):
            remove_quietly(p)
        raise
    finally:
        if not remove_quietly(paths.unifasta):
            warn(f"You can delete the file {paths.unifasta} by hand.")

    elapsed = time.time() - t0
    log(f"Done index database: {source_path} ({n} records, {elapsed:.1f}s)")
    return IndexReport(paths.source, n, k, paths, elapsed)


def load_metadata(fasta_file) -> pd.DataFrame:
    """Read <fasta>.json into a frame indexed by sequential id with columns id/desc/size."""
    with open(bundle_paths(fasta_file).json, "r", encoding="utf-8") as f:
        info = json.load(f)
    rows = [{"seq": int(key), **rec} for key, rec in info.items()]
    return pd.DataFrame(rows, columns=["seq", "id", "desc", "size"]).set_index("seq")
