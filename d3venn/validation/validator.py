"""Validation and auto-repair of set descriptions.

Examples
--------
>>> from d3venn.models import table_from_records
>>> from d3venn.validation.validator import validate
>>> df = table_from_records([
...     {"sets": "A", "size": 1},
...     {"sets": "B", "size": 1},
...     {"sets": ["B", "A"], "size": 5},
... ])
>>> res = validate(df)
>>> res.valid
False
>>> res.diagnostics[0].message
"size of set '(A, B)' exceeds its smallest main set - will be reduced"
>>> res.repaired["size"].tolist()
[1.0, 1.0, 1.0]
"""

from __future__ import annotations

from typing import Any, List, Sequence

from d3venn.models.entry import entries_from_table, entries_to_table
from d3venn.models.results import CheckResult, Diagnostic, Rejected, Repaired, Valid
from d3venn.validation.checks import (
    CONTENT_STAGES,
    Stage,
    check_is_table,
    check_required_fields,
    check_size_numeric,
    drop_unknown_fields,
)


def validate(sets: Any, *, stages: Sequence[Stage] = CONTENT_STAGES) -> CheckResult:
    """Check a set description and repair what can be repaired.

    Parameters
    ----------
    sets:
        Candidate table. Must be a DataFrame with ``sets`` and ``size`` columns
        and may have a ``label`` column.
    stages:
        Content stages to fold over the entries. Defaults to
        :data:`~d3venn.validation.checks.CONTENT_STAGES`.

    Returns
    -------
    CheckResult
        :class:`Rejected` for structural problems, :class:`Repaired` when at
        least one warning fired, otherwise :class:`Valid`. The input frame is
        never modified.
    """
    for structural in (check_is_table, check_required_fields, check_size_numeric):
        err = structural(sets)
        if err is not None:
            return Rejected(errors=(err,))

    warnings: List[Diagnostic] = []
    df, diag = drop_unknown_fields(sets)
    if diag is not None:
        warnings.append(diag)

    entries = entries_from_table(df)
    for stage in stages:
        entries, diag = stage(entries)
        if diag is not None:
            warnings.append(diag)

    table = entries_to_table(entries, with_label="label" in df.columns)
    if warnings:
        return Repaired(warnings=tuple(warnings), table=table)
    return Valid(table=table)
