#!/usr/bin/env python3
"""
cell_dist_cli.py — Writes a uniform field cellDist holding the processor rank.

Unlike "decomposePar -cellDist" this can run after decomposing the case, can
shuffle the processor ids (stronger contrast between neighbouring processors
when visualising) and writes uniform fields.

Usage:
  Serial (writes <case>/0/cellDist = 0):
    python cell_dist_cli.py -case cavity

  Parallel, shuffled:
    mpirun -np 4 python cell_dist_cli.py -case cavity -parallel -random -seed 42
"""

import sys
import argparse
import traceback

import mpi_env
from field_writer import field_path, write_uniform_field
from rank_assign import assign_rank
from run_config import ConfigurationError, Randomized, mode_from_flags

EXIT_CONFIG = 2
EXIT_ASSIGN = 3
EXIT_WRITE = 4


def fail(comm, args, rank: int, msg: str, code: int) -> int:
    print(f"[error] rank {rank}: {msg}", file=sys.stderr, flush=True)
    if args.verbose: traceback.print_exc()
    if args.parallel:
        # no partial field: take every other process down as well
        mpi_env.abort(comm, code)
    return code


def do_celldist(args: argparse.Namespace) -> int:
    # checked before MPI is touched
    try:
        mode = mode_from_flags(args.random, args.seed)
    except ConfigurationError as e:
        print(f"[error] {e}", file=sys.stderr)
        return EXIT_CONFIG

    comm = mpi_env.get_comm(args.parallel)
    rank = comm.Get_rank()
    master = mpi_env.is_master(comm)

    if args.verbose and master:
        if isinstance(mode, Randomized):
            print(f"[info] Shuffling {comm.Get_size()} processor ids (seed={mode.seed})")
        else:
            print(f"[info] Using processor ids as is ({comm.Get_size()} processes)")

    try:
        new_id = assign_rank(comm, mode)
    except Exception as e:
        return fail(comm, args, rank, f"Rank assignment failed: {e}", EXIT_ASSIGN)

    path = field_path(args.case_dir, args.time, args.field, rank if args.parallel else None)
    try:
        write_uniform_field(path, args.field, new_id)
    except Exception as e:
        return fail(comm, args, rank, f"Could not write {args.field}: {e}", EXIT_WRITE)

    if args.verbose:
        print(f"[info] rank {rank} -> {args.field} = {new_id} ({path})", flush=True)
    if master:
        print("end")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Creates a field cellDist with the value equal to the processor rank into the processor directories."
    )
    p.add_argument("-case", "--case", dest="case_dir", default=".", help="Case directory (default: current directory)")
    p.add_argument("-parallel", "--parallel", action="store_true", help="Run in parallel (one process per processor directory)")
    p.add_argument("-random", "--random", action="store_true", help="Randomly shuffle the processor ranks")
    p.add_argument("-seed", "--seed", type=int, default=None, help="The seed of the RNG, defaulting to 0. Requires -random")
    p.add_argument("-time", "--time", default="0", help="Time directory to write into (default: 0)")
    p.add_argument("--field", default="cellDist", help="Field name (default: cellDist)")
    p.add_argument("--verbose", action="store_true", help="Verbose output")
    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return do_celldist(args)


if __name__ == "__main__":
    sys.exit(main())
