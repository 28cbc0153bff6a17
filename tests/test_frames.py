import logging

import numpy as np
import pandas as pd
import pytest

from mixed_keys import (
    mixed_argsort,
    mixed_categories,
    mixed_rank,
    sort_frame_by_mixed_key,
)


def test_mixed_argsort():
    order = mixed_argsort(["s10", "s2", "s1"])
    np.testing.assert_array_equal(order, [2, 1, 0])
    assert order.dtype == np.intp


def test_mixed_argsort_missing_last(caplog):
    values = pd.Series(["s10", None, "s2", np.nan])
    with caplog.at_level(logging.DEBUG, logger="mixed_keys.data.frames"):
        order = mixed_argsort(values)
    np.testing.assert_array_equal(order, [2, 0, 1, 3])
    assert "2 missing value(s)" in caplog.text
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_missing_values_logged_by_every_helper(caplog):
    values = pd.Series(["a2", None, "a1"])
    with caplog.at_level(logging.DEBUG, logger="mixed_keys.data.frames"):
        mixed_rank(values)
        mixed_categories(values)
    assert caplog.text.count("1 missing value(s)") == 2


def test_mixed_argsort_descending_keeps_missing_last():
    order = mixed_argsort(["s1", None, "s10", "s2"], ascending=False)
    np.testing.assert_array_equal(order, [2, 3, 0, 1])


def test_mixed_argsort_missing_first():
    order = mixed_argsort(["s2", None, "s1"], na_position="first")
    np.testing.assert_array_equal(order, [1, 2, 0])


def test_mixed_argsort_follows_default_missing_position(monkeypatch):
    import mixed_keys.data.frames as frames

    monkeypatch.setattr(frames, "MISSING_POSITION", "first")
    np.testing.assert_array_equal(mixed_argsort(["s2", None, "s1"]), [1, 2, 0])


def test_mixed_argsort_rejects_unknown_na_position():
    with pytest.raises(ValueError, match="na_position"):
        mixed_argsort(["a"], na_position="middle")


def test_sort_frame_by_mixed_key_missing_first():
    df = pd.DataFrame({"sample": ["run 10", None, "run 9"]})
    out = sort_frame_by_mixed_key(df, "sample", na_position="first")
    assert out.index.tolist() == [1, 2, 0]


def test_mixed_argsort_empty():
    assert len(mixed_argsort([])) == 0


def test_mixed_rank_as_sort_values_key():
    df = pd.DataFrame({"filename": ["f10", "f2", "f1", "f2"], "v": [1, 2, 3, 4]})
    ranks = mixed_rank(df["filename"])
    pd.testing.assert_series_equal(
        ranks, pd.Series([2.0, 1.0, 0.0, 1.0], name="filename")
    )
    out = df.sort_values("filename", key=mixed_rank, kind="stable")
    assert out["filename"].tolist() == ["f1", "f2", "f2", "f10"]
    assert out["v"].tolist() == [3, 2, 4, 1]


def test_mixed_rank_missing_is_nan():
    ranks = mixed_rank(pd.Series(["a2", None, "a1"], index=[5, 6, 7]))
    assert ranks.loc[7] == 0.0
    assert ranks.loc[5] == 1.0
    assert np.isnan(ranks.loc[6])


def test_sort_frame_by_mixed_key():
    df = pd.DataFrame(
        {"sample": ["run 10", "run 9", "run 100"], "x": [0.1, 0.2, 0.3]},
        index=["a", "b", "c"],
    )
    out = sort_frame_by_mixed_key(df, "sample")
    assert out["sample"].tolist() == ["run 9", "run 10", "run 100"]
    assert out.index.tolist() == ["b", "a", "c"]
    assert df["sample"].tolist() == ["run 10", "run 9", "run 100"]

    desc = sort_frame_by_mixed_key(df, "sample", ascending=False)
    assert desc["sample"].tolist() == ["run 100", "run 10", "run 9"]


def test_sort_frame_by_mixed_key_missing_column():
    df = pd.DataFrame({"sample": ["a"]})
    with pytest.raises(ValueError, match="not in DataFrame"):
        sort_frame_by_mixed_key(df, "filename")


def test_mixed_categories():
    dtype = mixed_categories(["10 CFU", "1 CFU", "Unknown", "10 CFU", "0 CFU", None])
    assert dtype.ordered
    assert dtype.categories.tolist() == ["0 CFU", "1 CFU", "10 CFU", "Unknown"]
    cat = pd.Categorical(["10 CFU", "0 CFU"], dtype=dtype)
    assert cat.min() == "0 CFU"


def test_mixed_categories_orders_non_strings_by_text():
    dtype = mixed_categories([10, 2, 1])
    assert dtype.categories.tolist() == [1, 2, 10]


def test_mixed_categories_equal_labels_share_a_category():
    # 1 == True; "1" sorts before "True"
    dtype = mixed_categories([True, 1])
    assert dtype.categories.tolist() == [1]


def test_mixed_categories_rejects_unhashable_labels():
    with pytest.raises(TypeError, match="hashable, got list"):
        mixed_categories(["a", ["b"]])
