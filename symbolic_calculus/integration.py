# integration.py
import math
import numpy as np
import numba
from scipy.integrate import quad
from typing import Callable

from .logging_system import log_debug

# Sample points evaluated per batch; bounds memory for tiny steps
SAMPLE_CHUNK_SIZE = 65536


@numba.njit(cache=True)
def generate_sample_points(start, stop, step, max_count):
  """
  Up to max_count points start, start + step, ... not past stop, built by
  repeated addition. Returns the points and the next point to continue from.
  """
  points = np.empty(max_count, dtype=np.float64)
  n = 0
  point = start
  while n < max_count and point <= stop:
    points[n] = point
    n += 1
    point += step
  return points[:n], point


@numba.njit(cache=True)
def riemann_sum(values, step):
  """Sum of |value * step|, skipping samples whose area is not finite"""
  total = 0.0
  for i in range(values.shape[0]):
    area = values[i] * step
    if np.isfinite(area):
      total += abs(area)
  return total


def approximate_area(func: Callable[[np.ndarray], np.ndarray],
                     start: float, stop: float, step: float) -> float:
  """
  Approximate the area under a curve with a Riemann sum.

  Every rectangle counts with its absolute area, so the result is never
  negative; integrate sign-changing parts separately for signed area.
  Samples are evaluated in batches of SAMPLE_CHUNK_SIZE points.

  Args:
      func: Vectorized function of the sample points
      start, stop: Interval bounds, stop is included when it is hit exactly
      step: Rectangle width, must be positive

  Raises:
      ValueError: on a bad step or bounds, or when the step is too small to
          move past a sample point
  """
  start, stop, step = float(start), float(stop), float(step)
  if not step > 0 or not math.isfinite(step):
    raise ValueError(f"Integration step must be a positive finite number, got {step}")
  if not (math.isfinite(start) and math.isfinite(stop)):
    raise ValueError(f"Integration bounds must be finite, got [{start}, {stop}]")

  chunk_size = SAMPLE_CHUNK_SIZE
  total = 0.0
  n_points = 0
  skipped = 0
  point = start
  while True:
    points, point = generate_sample_points(point, stop, step, chunk_size)
    if len(points) == 0:
      break
    if point == points[-1]:
      raise ValueError(f"Integration step {step} is too small to advance past {point}")

    values = np.ascontiguousarray(
      np.broadcast_to(func(points), points.shape), dtype=np.float64)
    total += riemann_sum(values, step)
    n_points += len(points)
    skipped += int(np.count_nonzero(~np.isfinite(values * step)))
    if len(points) < chunk_size:
      break

  if skipped:
    log_debug(f"Riemann sum skipped {skipped} of {n_points} non-finite samples")
  return float(total)


def signed_area(func: Callable[[float], float], start: float, stop: float) -> float:
  """Signed definite integral by adaptive quadrature"""
  value, abs_error = quad(func, float(start), float(stop), limit=200)
  log_debug(f"quad on [{start}, {stop}] = {value} (error estimate {abs_error})")
  return float(value)
