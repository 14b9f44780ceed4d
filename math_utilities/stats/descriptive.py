"""
Descriptive statistics for small numeric samples.

This module implements the four summary statistics the library offers: mean,
median, mode and range. Samples may be plain lists or tuples, numpy arrays,
or pandas Series.

**Side effects**: compute_median and compute_range need the sample in
ascending order. By default they sort mutable samples (list, ndarray, Series)
IN PLACE, so the caller's sample is left sorted after the call. Pass
in_place=False, or set MATH_UTILITIES_SORT_IN_PLACE=false, to sort a copy
instead. Immutable samples such as tuples and read-only arrays are always
sorted as a copy.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from math_utilities.config.settings import EMPTY_RANGE_POLICIES, get_settings

logger = logging.getLogger(__name__)

Sample = Union[Sequence[float], np.ndarray, pd.Series]


def _as_list(sample: Union[Sample, Iterable[float]]) -> List[float]:
    """Read a sample into a list of Python scalars without touching it."""
    if isinstance(sample, (pd.Series, np.ndarray)):
        return sample.tolist()
    return list(sample)


def _sorted_sample(sample: Sample, in_place: Optional[bool]) -> List[float]:
    """
    Return the sample values in ascending numeric order.

    When in_place is True (or None and the settings say so), mutable samples
    are sorted through their own API so the caller observes the new order.
    """
    if in_place is None:
        in_place = get_settings().sort_in_place

    if in_place:
        if isinstance(sample, pd.Series):
            sample.sort_values(inplace=True)
            return sample.tolist()
        if isinstance(sample, np.ndarray) and not sample.flags.writeable:
            logger.debug("Sample array is read-only; sorting a copy")
        elif isinstance(sample, (list, np.ndarray)):
            sample.sort()
            return _as_list(sample)
        else:
            logger.debug(
                "Sample of type %s cannot be sorted in place; sorting a copy",
                type(sample).__name__,
            )

    return sorted(_as_list(sample))


def compute_mean(sample: Sample) -> float:
    """
    Compute the arithmetic mean of a sample.

    **Mathematical**:
        mean = (x_1 + x_2 + ... + x_n) / n
    The sum is accumulated from the last element back to the first.

    **Edge cases**:
    - An empty sample returns NaN (0 / 0 is left undefined, not raised).
    - NaN or infinite elements propagate through the sum.

    Args:
        sample: Sequence of numbers.

    Returns:
        Mean of the sample.
    """
    values = _as_list(sample)

    if not values:
        logger.debug("Mean of an empty sample is undefined; returning NaN")
        return float("nan")

    total = 0
    for value in reversed(values):
        total = value + total

    return total / len(values)


def compute_median(sample: Sample, in_place: Optional[bool] = None) -> float:
    """
    Compute the median (middle value) of a sample.

    **Functionally**:
    - Sorts the sample ascending (in place by default, see module docstring).
    - Empty sample returns 0.
    - One element returns that element.
    - Odd length returns the middle element.
    - Even length returns the mean of the two middle elements.

    Args:
        sample: Sequence of numbers.
        in_place: Sort the caller's sample (True), a copy (False), or follow
                  Settings.sort_in_place (None).

    Returns:
        Median of the sample.

    Example:
        >>> data = [4, 1, 3, 2]
        >>> compute_median(data)
        2.5
        >>> data
        [1, 2, 3, 4]
    """
    values = _sorted_sample(sample, in_place)
    n = len(values)

    if n == 0:
        return 0

    if n == 1:
        return values[0]

    if n % 2 == 1:
        return values[n // 2]

    return compute_mean([values[n // 2 - 1], values[n // 2]])


def compute_mode(sample: Sample) -> List[float]:
    """
    Compute the mode(s) of a sample.

    **Functionally**:
    - Counts occurrences by numeric value (1 and 1.0 count as the same value,
      and every NaN counts as the same value).
    - Every value that reaches the highest count is returned; ties are kept.
    - Order is the order in which each value reached the final maximum count,
      so compute_mode([1, 2, 2, 3, 3]) == [2, 3].
    - If no value repeats, every distinct value is a mode.
    - The sample is not modified.

    Args:
        sample: Sequence of numbers.

    Returns:
        List of modal values (empty for an empty sample).
    """
    occurrences = {}
    max_count = 0
    modes: List[float] = []

    for value in _as_list(sample):
        # NaN != NaN, so all NaNs share one key
        key = "nan" if value != value else value
        count = occurrences.get(key, 0) + 1
        occurrences[key] = count

        if count > max_count:
            # New leader: earlier modes had a lower count
            max_count = count
            modes = [value]
        elif count == max_count:
            modes.append(value)

    return modes


def compute_range(
    sample: Sample,
    in_place: Optional[bool] = None,
    empty_policy: Optional[str] = None,
) -> float:
    """
    Compute the range (max - min) of a sample.

    **Functionally**:
    - Sorts the sample ascending (in place by default, see module docstring),
      then returns last - first.
    - A single element returns 0.
    - An empty sample has no min or max. By default this raises ValueError;
      with empty_policy="nan" (or MATH_UTILITIES_EMPTY_RANGE=nan) it returns NaN.

    Args:
        sample: Sequence of numbers.
        in_place: Sort the caller's sample (True), a copy (False), or follow
                  Settings.sort_in_place (None).
        empty_policy: "raise" or "nan", or None to follow Settings.empty_range.

    Returns:
        Difference between the largest and smallest values.

    Raises:
        ValueError: If the sample is empty under the "raise" policy, or if
                    empty_policy is not a known policy.
    """
    if empty_policy is None:
        empty_policy = get_settings().empty_range
    elif empty_policy not in EMPTY_RANGE_POLICIES:
        raise ValueError(
            f"empty_policy must be one of {EMPTY_RANGE_POLICIES}, got: {empty_policy}"
        )

    values = _sorted_sample(sample, in_place)

    if not values:
        if empty_policy == "nan":
            logger.debug("Range of an empty sample requested; returning NaN")
            return float("nan")
        raise ValueError(
            "Cannot compute the range of an empty sample. "
            "Pass empty_policy='nan' or set MATH_UTILITIES_EMPTY_RANGE=nan "
            "to get NaN instead."
        )

    return values[-1] - values[0]


def describe_sample(sample: Sample) -> pd.Series:
    """
    Summarize a sample with all four statistics at once.

    The caller's sample is never reordered: median and range work on a copy.
    The range of an empty sample follows the configured empty-range policy.

    Args:
        sample: Sequence of numbers.

    Returns:
        Object-dtype Series indexed by count, mean, median, mode and range.
        The "mode" entry holds a list.

    Example:
        >>> describe_sample([1, 2, 2, 3])["mode"]
        [2]
    """
    values = _as_list(sample)

    return pd.Series(
        {
            "count": len(values),
            "mean": compute_mean(values),
            "median": compute_median(values, in_place=False),
            "mode": compute_mode(values),
            "range": compute_range(values, in_place=False),
        },
        dtype=object,
    )
