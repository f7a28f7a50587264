"""Worker pool sizing for worktree inspection."""

import os
from typing import Optional


def get_optimal_worker_count(
    user_specified: Optional[int] = None,
    task_count: Optional[int] = None,
) -> int:
    """Calculate the worker count for inspecting worktrees.

    Each worktree check spawns a few short git subprocesses, so the work is
    I/O-bound and a pool larger than the CPU count pays off.

    Args:
        user_specified: User-specified worker count, if provided
        task_count: Number of tasks to run; the pool never exceeds it

    Returns:
        Number of workers for parallel processing (at least 1)
    """
    if user_specified is not None and user_specified > 0:
        workers = user_specified
    else:
        cpu_count = os.cpu_count() or 1
        # CPU_count + 4 is a good heuristic for I/O-bound work, capped at 32
        workers = min(32, cpu_count + 4)

    if task_count is not None:
        workers = min(workers, max(1, task_count))

    return workers
