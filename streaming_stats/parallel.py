"""Partition-and-combine reduction of sample arrays.

Accumulators carry no locks; parallelism comes from splitting a sample
array into contiguous partitions, reducing each partition into its own
accumulator on a worker, and folding the partial accumulators together
with ``combine`` in partition order.

Example:
    >>> import numpy as np
    >>> from streaming_stats.parallel import parallel_accumulate
    >>> samples = np.random.default_rng(0).normal(10.0, 2.0, 100_000)
    >>> stats = parallel_accumulate(samples, n_workers=4)
    >>> stats.get_count()
    100000
"""

from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
import logging
import math
import os
from typing import Iterable, List, Optional, Tuple, Type

import numpy as np

from streaming_stats.sample_statistics import VarianceStatistics

logger = logging.getLogger(__name__)


def create_chunks(n_items: int, chunk_size: int) -> List[Tuple[int, int]]:
    """Create contiguous work chunks.

    Args:
        n_items: Number of items to split
        chunk_size: Size of each chunk; the last chunk may be shorter

    Returns:
        List[Tuple[int, int]]: List of (start_idx, end_idx) pairs
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return [(i, min(i + chunk_size, n_items)) for i in range(0, n_items, chunk_size)]


def accumulate_chunk(accumulator_cls: Type, values: np.ndarray):
    """Reduce one partition into a fresh accumulator."""
    stats = accumulator_cls()
    stats.accept_array(values)
    return stats


def combine_all(accumulators: Iterable, accumulator_cls: Optional[Type] = None):
    """Fold partial accumulators, in iteration order, into a new accumulator.

    Args:
        accumulators: Partial accumulators of one class.
        accumulator_cls: Class of the result; defaults to the class of the
            first partial, or ``VarianceStatistics`` when there is none.

    Returns:
        A new accumulator holding the merged statistics. The partials are
        not modified.
    """
    result = None
    for partial in accumulators:
        if result is None:
            result = (accumulator_cls or type(partial))()
        result.combine(partial)
    if result is None:
        result = (accumulator_cls or VarianceStatistics)()
    return result


def parallel_accumulate(
    values,
    accumulator_cls: Type = VarianceStatistics,
    n_workers: Optional[int] = None,
    chunk_size: Optional[int] = None,
    use_processes: bool = True,
):
    """Reduce a sample array on a worker pool and merge the partials.

    Args:
        values: Array-like of samples; flattened before partitioning.
        accumulator_cls: ``VarianceStatistics`` or ``SampleStatistics``.
        n_workers: Number of workers (None = CPU count).
        chunk_size: Samples per partition (None = split evenly across
            workers).
        use_processes: Use a process pool; otherwise a thread pool.

    Returns:
        Accumulator equivalent, up to rounding, to accepting every sample
        in order.
    """
    flat = np.asarray(values, dtype=np.float64).ravel()
    if flat.size == 0:
        return accumulator_cls()

    n_workers = n_workers or os.cpu_count() or 1
    if chunk_size is None:
        chunk_size = max(1, math.ceil(flat.size / n_workers))
    chunks = create_chunks(int(flat.size), chunk_size)
    logger.debug(
        "Reducing %d samples in %d chunks on %d %s",
        flat.size,
        len(chunks),
        n_workers,
        "processes" if use_processes else "threads",
    )

    executor_cls = ProcessPoolExecutor if use_processes else ThreadPoolExecutor
    partials = []
    with executor_cls(max_workers=n_workers) as executor:
        futures = {
            executor.submit(accumulate_chunk, accumulator_cls, flat[start:end]): (start, end)
            for start, end in chunks
        }
        for future in as_completed(futures):
            start, end = futures[future]
            try:
                partials.append((start, future.result()))
            except Exception:
                logger.error("Reduction of samples %d-%d failed", start, end)
                raise

    # Sort results by original order
    partials.sort(key=lambda x: x[0])
    return combine_all((partial for _, partial in partials), accumulator_cls)


def accumulate_with_config(values, config):
    """Run :func:`parallel_accumulate` with the settings of a ``StatisticsConfig``."""
    return parallel_accumulate(
        values,
        accumulator_cls=config.accumulator_class(),
        n_workers=config.n_workers,
        chunk_size=config.chunk_size,
    )
