"""Tests for Entry records and table conversion."""

from __future__ import annotations

import dataclasses

import numpy as np
import pandas as pd
import pytest

from d3venn.models.entry import (
    Entry,
    coerce_elements,
    entries_from_table,
    entries_to_table,
    table_from_records,
)
from d3venn.models.results import Diagnostic, Rejected, Repaired, Valid, VennInputError


# -----------------------------------------------------------------------
# Entry
# -----------------------------------------------------------------------


def test_entry_key_is_order_independent() -> None:
    assert Entry(sets=("A", "B"), size=1).key == Entry(sets=("B", "A"), size=2).key


def test_entry_render() -> None:
    assert Entry(sets=("C", "D"), size=1).render() == "(C, D)"
    assert Entry(sets=("A",), size=1).render() == "(A)"


def test_entry_main_set_flag() -> None:
    assert Entry(sets=("A",), size=1).is_main_set
    assert not Entry(sets=("A", "B"), size=1).is_main_set


def test_entry_frozen() -> None:
    e = Entry(sets=("A",), size=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.size = 3  # type: ignore[misc]


def test_to_record_integral_sizes_become_int() -> None:
    rec = Entry(sets=("A",), size=10.0, label="Set A").to_record(with_label=True)
    assert rec == {"sets": ["A"], "size": 10, "label": "Set A"}
    assert isinstance(rec["size"], int)
    assert Entry(sets=("A",), size=2.5).to_record() == {"sets": ["A"], "size": 2.5}


def test_to_record_omits_missing_label() -> None:
    assert "label" not in Entry(sets=("A",), size=1).to_record(with_label=True)


# -----------------------------------------------------------------------
# Cell coercion and frame conversion
# -----------------------------------------------------------------------


def test_coerce_elements_variants() -> None:
    assert coerce_elements("A") == ("A",)
    assert coerce_elements(1) == ("1",)
    assert coerce_elements(["A", "B"]) == ("A", "B")
    assert coerce_elements(("B", ["A", "C"])) == ("B", "A", "C")
    assert coerce_elements(np.array(["X", "Y"])) == ("X", "Y")
    assert coerce_elements(None) == ()


def test_table_from_records_keeps_list_cells() -> None:
    df = table_from_records([
        {"sets": ["A", "B"], "size": 1},
        {"sets": ["A", "B"], "size": 2},
    ])
    assert list(df.columns) == ["sets", "size"]
    assert len(df) == 2
    assert df["sets"].tolist() == [["A", "B"], ["A", "B"]]


def test_table_from_records_union_of_columns() -> None:
    df = table_from_records([
        {"sets": "A", "size": 1},
        {"sets": "B", "size": 2, "label": "bee"},
    ])
    assert list(df.columns) == ["sets", "size", "label"]
    assert df["label"].tolist() == [None, "bee"]


def test_entries_roundtrip_through_frame() -> None:
    df = table_from_records([
        {"sets": "A", "size": 3, "label": "a"},
        {"sets": ["A", "B"], "size": 1, "label": "ab"},
    ])
    entries = entries_from_table(df)
    assert entries == [
        Entry(sets=("A",), size=3.0, label="a"),
        Entry(sets=("A", "B"), size=1.0, label="ab"),
    ]
    back = entries_to_table(entries, with_label=True)
    assert list(back.columns) == ["sets", "size", "label"]
    assert back["sets"].tolist() == [["A"], ["A", "B"]]
    assert back["size"].tolist() == [3.0, 1.0]


def test_entries_from_table_nan_label_is_none() -> None:
    df = pd.DataFrame({"sets": ["A"], "size": [1], "label": [np.nan]})
    assert entries_from_table(df)[0].label is None


def test_entries_to_table_empty() -> None:
    df = entries_to_table([])
    assert list(df.columns) == ["sets", "size"]
    assert len(df) == 0


# -----------------------------------------------------------------------
# Result variants
# -----------------------------------------------------------------------


def test_result_variants_uniform_interface() -> None:
    table = entries_to_table([Entry(sets=("A",), size=1)])
    warn = Diagnostic(message="w", severity="warning", check="x")
    err = Diagnostic(message="bad input", severity="error", check="type")

    ok = Valid(table=table)
    assert ok.valid and ok.diagnostics == () and ok.repaired is table
    ok.raise_if_rejected()

    fixed = Repaired(warnings=(warn,), table=table)
    assert not fixed.valid and fixed.diagnostics == (warn,) and fixed.repaired is table
    fixed.raise_if_rejected()

    rej = Rejected(errors=(err,))
    assert not rej.valid and rej.repaired is None
    assert rej.message == "bad input"
    with pytest.raises(VennInputError, match="bad input") as exc:
        rej.raise_if_rejected()
    assert exc.value.diagnostics == (err,)
    assert isinstance(exc.value, ValueError)


def test_coerce_elements_missing_values_name_nothing() -> None:
    assert coerce_elements(np.nan) == ()
    assert coerce_elements(pd.NA) == ()
    assert coerce_elements(["A", np.nan, None, pd.NA]) == ("A",)
