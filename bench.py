import time
from typing import Tuple

from src.beziermarks import DEFAULT_CONTROL_POINTS, sample_curve


def benchmark_sampling(
    step: float, spacing: float = 10.0, repeats: int = 20
) -> Tuple[float, int]:
    start = time.perf_counter()
    count = 0
    for _ in range(repeats):
        count = len(sample_curve(*DEFAULT_CONTROL_POINTS, 0.0, spacing, step))
    elapsed = time.perf_counter() - start
    return repeats / elapsed, count


for step in (0.01, 0.005, 0.001, 0.0005, 0.0001):
    curves_per_second, markers = benchmark_sampling(step)
    print(
        f"step {step:<7g} → {curves_per_second:9.1f} curves/sec "
        f"({markers:3d} markers per curve)"
    )
