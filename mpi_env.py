# mpi_env.py
# mpi4py is imported on demand: importing it initialises MPI.

def get_comm(parallel: bool):
    from mpi4py import MPI
    return MPI.COMM_WORLD if parallel else MPI.COMM_SELF

def is_master(comm) -> bool:
    return comm.Get_rank() == 0

def abort(comm, code: int):
    # terminates every process of the communicator
    comm.Abort(code)
