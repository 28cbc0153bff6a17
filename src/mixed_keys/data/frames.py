"""
Mixed-key ordering for numpy arrays and pandas Series/DataFrames.

Labels such as sample names, file names or concentration groups often carry
embedded numbers ("sample 2", "sample 10"). These helpers order them by mixed
key so categorical axes, filter options and tables read naturally. Values are
compared through str(); missing values (None / NaN) go last unless
na_position says otherwise.
"""

import logging
from typing import Any, Iterable, List, Optional

import numpy as np
import pandas as pd

from mixed_keys.constants import MISSING_POSITION
from mixed_keys.ordering.sort import ByMixedKey

logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def _split_missing(values: Iterable[Any]) -> tuple[list, List[int], List[int]]:
    """Return (values as list, present positions, missing positions)."""
    if isinstance(values, (pd.Series, pd.Index)):
        vals = values.tolist()
    else:
        vals = list(values)
    present, missing = [], []
    for pos, v in enumerate(vals):
        (missing if _is_missing(v) else present).append(pos)
    if missing:
        logger.debug(
            "Found %d missing value(s) among %d labels", len(missing), len(vals)
        )
    return vals, present, missing


def _ordered_present(vals: list, present: List[int]) -> List[int]:
    """Positions of present values in mixed-key order (keys parsed once)."""
    view = ByMixedKey([str(vals[p]) for p in present])
    logger.debug("Precomputed %d mixed keys", len(view))
    return [present[k] for k in view.argsort()]


def mixed_argsort(
    values: Iterable[Any],
    *,
    ascending: bool = True,
    na_position: Optional[str] = None,
) -> np.ndarray:
    """
    Compute the permutation that sorts values by mixed key.

    Example: ["s10", None, "s2"] -> [2, 0, 1].

    Args:
        values: List, array, Index or Series of labels.
        ascending: If False, order present values non-increasing. Missing
            values are placed by na_position either way.
        na_position: "first" or "last"; defaults to MISSING_POSITION.

    Returns:
        Integer array of positions (np.intp).
    """
    position = na_position if na_position is not None else MISSING_POSITION
    if position not in ("first", "last"):
        raise ValueError(
            f"na_position must be 'first' or 'last', got {position!r}"
        )

    vals, present, missing = _split_missing(values)
    order = _ordered_present(vals, present)
    if not ascending:
        order.reverse()
    order = missing + order if position == "first" else order + missing
    return np.asarray(order, dtype=np.intp)


def mixed_rank(series: pd.Series) -> pd.Series:
    """
    Dense 0-based rank of each value in mixed-key order.

    Intended as a sort key: df.sort_values("filename", key=mixed_rank).
    Values with the same string form share a rank; missing values rank NaN.

    Args:
        series: Labels to rank.

    Returns:
        Float Series aligned with series.index.
    """
    vals, present, _ = _split_missing(series)
    ranks = np.full(len(vals), np.nan)
    rank, prev = -1, None
    for pos in _ordered_present(vals, present):
        label = str(vals[pos])
        if label != prev:
            rank += 1
            prev = label
        ranks[pos] = rank
    return pd.Series(ranks, index=series.index, name=series.name)


def sort_frame_by_mixed_key(
    df: pd.DataFrame,
    column: str,
    *,
    ascending: bool = True,
    na_position: Optional[str] = None,
) -> pd.DataFrame:
    """
    Reorder DataFrame rows by the mixed key of one column.

    Args:
        df: DataFrame to sort.
        column: Name of the label column.
        ascending: Direction for present values.
        na_position: "first" or "last"; defaults to MISSING_POSITION.

    Returns:
        Reordered copy of df (index labels preserved).
    """
    if column not in df.columns:
        raise ValueError(
            f"column '{column}' not in DataFrame. Available: {list(df.columns)}"
        )
    order = mixed_argsort(df[column], ascending=ascending, na_position=na_position)
    return df.iloc[order].copy()


def mixed_categories(values: Iterable[Any]) -> pd.CategoricalDtype:
    """
    Build an ordered categorical dtype from labels in mixed-key order.

    Example: ["10 CFU", "1 CFU", "10 CFU", "0 CFU"] -> categories
    ["0 CFU", "1 CFU", "10 CFU"].

    Args:
        values: Hashable labels; duplicates and missing values are dropped.
            Labels that compare equal (1 and True) are one category, the
            first in mixed-key order.

    Returns:
        pd.CategoricalDtype with ordered=True.

    Raises:
        TypeError: If a label is unhashable.
    """
    vals, present, _ = _split_missing(values)
    for pos in present:
        if not pd.api.types.is_hashable(vals[pos]):
            raise TypeError(
                f"category labels must be hashable, got {type(vals[pos]).__name__}"
            )
    unique: list = []
    seen: set = set()
    for pos in _ordered_present(vals, present):
        v = vals[pos]
        if v not in seen:
            seen.add(v)
            unique.append(v)
    return pd.CategoricalDtype(categories=unique, ordered=True)
