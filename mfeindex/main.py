#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
main.py
Command-line entry:
  - index : build <fasta>.json / .2bit / .sqlite3.db (skipped when already indexed)
  - status: one TSV line per FASTA describing its bundle
  - info  : length statistics from the .json sidecar
"""
from __future__ import annotations
import os, argparse

from .external import CommandError, FATOTWOBIT_ENV, INDEXER_ENV
from .indexer import ensure_index, db_indexed, is_big_db, big_db_dir, load_metadata
from .util import log


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="mfeindex",
        description="Index FASTA files for fast primer/sequence lookups.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    sub = p.add_subparsers(dest="command", required=True)

    ix = sub.add_parser("index", help="Build the index bundle.",
                        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    ix.add_argument("fasta", nargs="+", help="FASTA file(s), plain or .gz.")
    ix.add_argument("-k", type=int, default=9, help="k-mer length.")
    ix.add_argument("--force", action="store_true", help="Rebuild even when already indexed.")
    ix.add_argument("--fatotwobit", default=None,
                    help=f"faToTwoBit path (default: ${FATOTWOBIT_ENV} or $PATH).")
    ix.add_argument("--indexer", default=None,
                    help=f"k-mer indexer path (default: ${INDEXER_ENV} or $PATH).")
    ix.add_argument("--no-progress", action="store_true", help="Hide the record progress bar.")

    st = sub.add_parser("status", help="Show whether FASTA files are indexed.")
    st.add_argument("fasta", nargs="+")

    nf = sub.add_parser("info", help="Summarise the records of an indexed FASTA.")
    nf.add_argument("fasta")

    args = p.parse_args(argv)
    if args.command == "index" and args.k <= 0:
        p.error("-k must be a positive integer")
    return args


def cmd_index(args) -> None:
    for fa in args.fasta:
        report = ensure_index(fa, k=args.k, force_reindex=args.force,
                              fatotwobit=args.fatotwobit, indexer=args.indexer,
                              progress=not args.no_progress)
        if report is None:
            log(f"[SKIP] already indexed: {fa}")

def cmd_status(args) -> None:
    print("path\tindexed\tsize_bytes\tbig\tbig_db_dir")
    for fa in args.fasta:
        if not os.path.isfile(fa):
            print(f"{fa}\tmissing\t0\tFalse\t")
            continue
        big = is_big_db(fa)
        print("\t".join([fa, str(db_indexed(fa)), str(os.path.getsize(fa)),
                         str(big), big_db_dir(fa) if big else ""]))

def cmd_info(args) -> None:
    df = load_metadata(args.fasta)
    sizes = df["size"]
    print(f"records\t{len(df)}")
    print(f"bases\t{int(sizes.sum())}")
    if len(df):
        print(f"min\t{int(sizes.min())}")
        print(f"max\t{int(sizes.max())}")
        print(f"mean\t{sizes.mean():.1f}")


def main(argv=None):
    args = parse_args(argv)
    handlers = {"index": cmd_index, "status": cmd_status, "info": cmd_info}
    try:
        handlers[args.command](args)
    except (FileNotFoundError, CommandError, ValueError) as e:
        raise SystemExit(f"ERROR: {e}")

if __name__ == "__main__":
    main()
