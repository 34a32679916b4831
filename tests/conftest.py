import numpy as np
import pytest


class LoopbackComm:
    """
    In-process stand-in for an MPI communicator seen from one rank.
    Ranks sharing a `wire` dict see the root's Bcast payload; run the root first.
    """

    def __init__(self, rank: int, size: int, wire: dict | None = None):
        self.rank = rank
        self.size = size
        self.wire = {} if wire is None else wire
        self.bcast_calls = 0
        self.aborted = None

    def Get_rank(self):
        return self.rank

    def Get_size(self):
        return self.size

    def Bcast(self, buf, root=0):
        self.bcast_calls += 1
        if self.rank == root:
            self.wire["payload"] = np.array(buf, copy=True)
        else:
            buf[...] = self.wire["payload"]

    def Abort(self, code=0):
        self.aborted = code


class CorruptingComm(LoopbackComm):
    """Delivers a payload with a duplicated entry to non-root ranks."""

    def Bcast(self, buf, root=0):
        super().Bcast(buf, root)
        if self.rank != root and buf.size > 1:
            buf[1] = buf[0]


class BrokenComm(LoopbackComm):
    def Bcast(self, buf, root=0):
        self.bcast_calls += 1
        raise RuntimeError("broadcast lost")


@pytest.fixture
def group():
    """group(size) -> list of LoopbackComm objects sharing one wire, rank order."""
    def make(size, cls=LoopbackComm):
        wire = {}
        return [cls(r, size, wire) for r in range(size)]
    return make
