# -*- coding: utf-8 -*-
"""
external.py
Run external commands (faToTwoBit, the k-mer indexer):
- Locate executables from an explicit path, an environment variable or $PATH
- Execute a command and hand back its exit code
"""
from __future__ import annotations
import os, shutil, subprocess
from typing import Callable, List, Optional

FATOTWOBIT = "faToTwoBit"
FATOTWOBIT_ENV = "MFEINDEX_FATOTWOBIT"
INDEXER = "pymfeindex"
INDEXER_ENV = "MFEINDEX_INDEXER"


class CommandError(RuntimeError):
    pass

class ToolNotFound(FileNotFoundError):
    pass


def find_tool(name: str, env: str, bin_hint: Optional[str] = None) -> str:
    cand = bin_hint or os.getenv(env) or name
    path = shutil.which(cand)
    if not path:
        raise ToolNotFound(f"required command not found: {cand} (set {env} or pass its path)")
    return path


class SubprocessRunner:
    """
    Execute external commands, blocking until they exit.
    :params logger: log function, used 4 recording commands and failures.
    """
    def __init__(self, logger: Optional[Callable[[str], None]] = None):
        self.logger = logger

    def run(self, cmd: List[str]) -> int:
        if self.logger:
            self.logger(f"[CMD] {' '.join(cmd)}")
        try:
            p = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
        except OSError as e:
            raise CommandError(f"Failed to run command: {' '.join(cmd)}\nError: {e}") from e
        if p.returncode != 0 and self.logger:
            self.logger(f"[CMD FAILED] {' '.join(cmd)}\nRETURN CODE: {p.returncode}\n"
                        f"STDOUT:\n{p.stdout}\nSTDERR:\n{p.stderr}")
        return p.returncode


def check_run(runner, cmd: List[str]) -> None:
    """Run cmd through runner; a non-zero exit code becomes CommandError."""
    code = runner.run(cmd)
    if code != 0:
        raise CommandError(f"[cmd failed] {' '.join(cmd)} (exit code {code})")

def fa_to_two_bit(runner, exe: str, fasta: str, out: str) -> None:
    check_run(runner, [exe, fasta, out])

def build_kmer_index(runner, exe: str, fasta: str, k: int, out: str) -> None:
    check_run(runner, [exe, "-f", fasta, "-k", str(k), "-o", out])
