import os
from pathlib import Path

import pytest

from mfeindex.external import FATOTWOBIT_ENV, INDEXER_ENV


class FakeRunner:
    """Stands in for faToTwoBit / the k-mer indexer: records commands, writes outputs."""

    def __init__(self, codes=None):
        self.calls = []
        self.codes = codes or {}
        self.unifasta = []

    def run(self, cmd):
        self.calls.append(list(cmd))
        exe = os.path.basename(cmd[0])
        if "-o" in cmd:
            src, out = cmd[cmd.index("-f") + 1], cmd[cmd.index("-o") + 1]
        else:
            src, out = cmd[1], cmd[2]
        self.unifasta.append(Path(src).read_text())
        code = self.codes.get(exe, 0)
        if code == 0:
            Path(out).write_bytes(b"\x00" + exe.encode())
        return code


@pytest.fixture(autouse=True)
def _no_tool_env(monkeypatch):
    monkeypatch.delenv(FATOTWOBIT_ENV, raising=False)
    monkeypatch.delenv(INDEXER_ENV, raising=False)


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def fasta(tmp_path):
    p = tmp_path / "db.fa"
    p.write_text(">seq1 desc one\nATCG\n>seq2 desc two\nGGTTA\n")
    return p
