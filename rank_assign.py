# rank_assign.py
import numpy as np

from run_config import Identity, Randomized
from seq_utils import generate

COORDINATOR = 0


class DistributionError(RuntimeError):
    pass


def sorted_order(draws) -> np.ndarray:
    # stable sort: equal draws keep ascending index order
    return np.argsort(np.asarray(draws, dtype=np.float64), kind="stable").astype(np.int64)


def permutation_from_draws(draws) -> np.ndarray:
    """
    perm[i] is the position of draw i in ascending order, i.e. the new id of rank i.
    [0.7, 0.1, 0.9, 0.3] -> order [1, 3, 0, 2] -> perm [2, 0, 3, 1]
    """
    order = sorted_order(draws)
    perm = np.empty(order.size, dtype=np.int64)
    perm[order] = np.arange(order.size, dtype=np.int64)
    return perm


def compute_permutation(seed: int, count: int) -> np.ndarray:
    perm = permutation_from_draws(generate(seed, count))
    perm.setflags(write=False)
    return perm


def is_permutation(values, count: int) -> bool:
    arr = np.asarray(values)
    if arr.ndim != 1 or arr.size != count:
        return False
    if count == 0:
        return True
    if arr.min() < 0 or arr.max() >= count:
        return False
    return bool(np.all(np.bincount(arr.astype(np.int64), minlength=count) == 1))


def distribute_permutation(comm, permutation, root: int = COORDINATOR) -> np.ndarray:
    """
    Synchronous one-to-many broadcast of the full permutation from `root`.
    Non-root ranks pass permutation=None. Every rank returns its own read-only copy.
    """
    size = comm.Get_size()
    rank = comm.Get_rank()

    if rank == root:
        if permutation is None:
            raise ValueError("root must supply the permutation")
        if not is_permutation(permutation, size):
            raise ValueError(f"root permutation is not a bijection on 0..{size - 1}")
        buf = np.array(permutation, dtype=np.int64)
    else:
        buf = np.empty(size, dtype=np.int64)

    comm.Bcast(buf, root=root)

    if not is_permutation(buf, size):
        raise DistributionError(f"rank {rank} received an invalid permutation from rank {root}")
    buf.setflags(write=False)
    return buf


def assign_rank(comm, mode, root: int = COORDINATOR) -> int:
    rank = comm.Get_rank()
    if isinstance(mode, Identity):
        return rank
    if not isinstance(mode, Randomized):
        raise TypeError(f"unsupported run mode: {mode!r}")

    size = comm.Get_size()
    if size < 1:
        raise ValueError(f"invalid participant count {size}")

    perm = compute_permutation(mode.seed, size) if rank == root else None
    perm = distribute_permutation(comm, perm, root=root)
    return int(perm[rank])
