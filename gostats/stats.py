import math
import statistics
from typing import NamedTuple


class Summary(NamedTuple):
    count: int
    min: float
    q1: float
    median: float
    q3: float
    max: float
    sum: float
    mean: float
    stddev: float
    stderr: float


def total(numbers):
    x = 0.0
    for r in numbers:
        x += r
    return x


def average(numbers):
    return total(numbers) / len(numbers)


def minimum(numbers):
    return min(numbers)


def maximum(numbers):
    return max(numbers)


def variance(numbers):
    """
    Calculate the population variance (divides by n, not n - 1)
    """
    mean = average(numbers)
    x = 0.0
    for r in numbers:
        x += (r - mean) * (r - mean)
    return x / len(numbers)


def stddev(numbers):
    return math.sqrt(variance(numbers))


def stderr(numbers):
    """
    Calculate the standard error of the mean
    """
    return stddev(numbers) / math.sqrt(len(numbers))


def quantile(numbers):
    """
    Calculate the first quartile, median and third quartile.

    Sorts `numbers` in place, then takes the medians of the lower half, the
    whole sequence and the upper half. With an odd count the middle element
    belongs to the upper half. A single number is all three quartiles.
    """
    numbers.sort()
    if len(numbers) == 1:
        return numbers[0], numbers[0], numbers[0]
    half = len(numbers) // 2
    return (statistics.median(numbers[:half]),
            statistics.median(numbers),
            statistics.median(numbers[half:]))


def summarize(numbers):
    """
    Calculate all statistics of a non-empty list of numbers.

    The list is sorted in place as a side effect; callers must not rely on
    its original order afterwards.
    """
    q1, med, q3 = quantile(numbers)
    return Summary(
        count=len(numbers),
        min=minimum(numbers),
        q1=q1,
        median=med,
        q3=q3,
        max=maximum(numbers),
        sum=total(numbers),
        mean=average(numbers),
        stddev=stddev(numbers),
        stderr=stderr(numbers),
    )
