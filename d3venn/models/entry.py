"""Typed rows of a Venn set description.

A set description is a :class:`pandas.DataFrame` with columns ``sets``,
``size`` and optionally ``label`` (the layout venn.js reads). The validator
works on :class:`Entry` records instead of raw cells, so this module owns the
conversion in both directions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd


REQUIRED_FIELDS: Tuple[str, str] = ("sets", "size")
OPTIONAL_FIELDS: Tuple[str] = ("label",)


@dataclass(frozen=True)
class Entry:
    """One main set or intersection.

    Attributes
    ----------
    sets:
        Element identifiers. One element names a main set, two or more
        describe an intersection of main sets.
    size:
        Cardinality as drawn.
    label:
        Optional display label, ``None`` when the table has no label.
    """

    sets: Tuple[str, ...]
    size: float
    label: Optional[str] = None

    @property
    def key(self) -> FrozenSet[str]:
        """Order-independent identity of the entry."""
        return frozenset(self.sets)

    @property
    def is_main_set(self) -> bool:
        return len(self.sets) == 1

    def render(self) -> str:
        """Render as ``(e1, e2, ...)`` for diagnostics."""
        return "(" + ", ".join(self.sets) + ")"

    def to_record(self, with_label: bool = False) -> Dict[str, Any]:
        """JSON-friendly dict (``sets`` is always a list)."""
        rec: Dict[str, Any] = {"sets": list(self.sets), "size": _plain_number(self.size)}
        if with_label and self.label is not None:
            rec["label"] = self.label
        return rec


def _plain_number(x: float) -> Any:
    """Return an int for integral floats so payloads read ``10`` and not ``10.0``."""
    x = float(x)
    if np.isfinite(x) and x.is_integer():
        return int(x)
    return x


def coerce_elements(cell: Any) -> Tuple[str, ...]:
    """Turn one ``sets`` cell into a tuple of identifiers.

    Scalars become a one-element tuple. Lists, tuples and arrays are flattened
    one level deep, mirroring how list columns are built by hand.

    >>> coerce_elements("A")
    ('A',)
    >>> coerce_elements(["B", ["A"]])
    ('B', 'A')

    Missing values (``None``, NaN, ``pd.NA``) are not identifiers; a missing
    cell yields an empty tuple.

    >>> coerce_elements(float("nan"))
    ()
    """
    if cell is None:
        return ()
    if isinstance(cell, str) or pd.api.types.is_scalar(cell):
        return () if pd.isna(cell) else (str(cell),)
    out: List[str] = []
    for item in cell:
        if isinstance(item, (list, tuple, np.ndarray)):
            out.extend(str(x) for x in item if not _is_missing(x))
        elif not _is_missing(item):
            out.append(str(item))
    return tuple(out)


def _is_missing(x: Any) -> bool:
    return x is None or (pd.api.types.is_scalar(x) and bool(pd.isna(x)))


def _coerce_label(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and np.isnan(value):
        return None
    return str(value)


def entries_from_table(df: pd.DataFrame) -> List[Entry]:
    """Build :class:`Entry` records from a frame that has ``sets`` and ``size``.

    ``size`` is converted with :func:`pandas.to_numeric`, so a non-numeric
    column raises ``ValueError``.
    """
    sizes = pd.to_numeric(df["size"], errors="raise").to_numpy(dtype=float)
    has_label = "label" in df.columns
    labels = df["label"].tolist() if has_label else [None] * len(df)

    return [
        Entry(sets=coerce_elements(cell), size=float(size), label=_coerce_label(label))
        for cell, size, label in zip(df["sets"].tolist(), sizes, labels)
    ]


def entries_to_table(entries: Sequence[Entry], with_label: bool = False) -> pd.DataFrame:
    """Inverse of :func:`entries_from_table`; ``sets`` cells become lists."""
    columns = list(REQUIRED_FIELDS) + (["label"] if with_label else [])
    data: Dict[str, list] = {
        "sets": [list(e.sets) for e in entries],
        "size": [e.size for e in entries],
    }
    if with_label:
        data["label"] = [e.label for e in entries]
    return pd.DataFrame(data, columns=columns)


def table_from_records(records: Iterable[Mapping[str, Any]]) -> pd.DataFrame:
    """Build a set description frame from dict records.

    Unlike ``pd.DataFrame(records)``, this keeps list-valued ``sets`` cells as
    single objects instead of letting pandas broadcast them.

    >>> df = table_from_records([{"sets": "A", "size": 3}, {"sets": ["A", "B"], "size": 1}])
    >>> df["sets"].tolist()
    ['A', ['A', 'B']]
    """
    rows = [dict(r) for r in records]
    columns: List[str] = []
    for r in rows:
        for k in r:
            if k not in columns:
                columns.append(k)

    data: Dict[str, pd.Series] = {}
    for c in columns:
        values = [r.get(c) for r in rows]
        data[c] = pd.Series(values, dtype=object if c in ("sets", "label") else None)
    return pd.DataFrame(data, columns=columns)
