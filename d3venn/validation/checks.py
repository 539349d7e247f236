"""Individual checks of the set description validator.

Structural checks look at the raw frame and return an ``error``
:class:`~d3venn.models.results.Diagnostic` (or ``None``). They are terminal:
nothing can be drawn from a frame that fails them.

Content checks are *stages*: each takes the current list of
:class:`~d3venn.models.entry.Entry` records and returns the repaired list plus
an optional ``warning``. They never raise, and a stage that finds nothing
returns its input unchanged. :data:`CONTENT_STAGES` fixes their order; later
stages rely on the work of earlier ones (e.g. duplicates are detected after
elements were reduced).
"""

from __future__ import annotations

import dataclasses
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple

import numpy as np
import pandas as pd

from d3venn.models.entry import OPTIONAL_FIELDS, REQUIRED_FIELDS, Entry
from d3venn.models.results import Diagnostic


StageResult = Tuple[List[Entry], Optional[Diagnostic]]
Stage = Callable[[List[Entry]], StageResult]


def _ngettext(n: int, singular: str, plural: str) -> str:
    return singular if n == 1 else plural


def _quoted(items: Sequence[str]) -> str:
    return ", ".join(f"'{s}'" for s in items)


def _warning(check: str, offenders: Sequence[str], singular: str, plural: str) -> Diagnostic:
    """Build a warning whose message embeds the quoted offender list at ``%s``."""
    template = _ngettext(len(offenders), singular, plural)
    return Diagnostic(
        message=template % _quoted(offenders),
        severity="warning",
        check=check,
        offenders=tuple(offenders),
    )


# ---------------------------------------------------------------------------
# Structural checks (terminal)
# ---------------------------------------------------------------------------


def check_is_table(obj: object) -> Optional[Diagnostic]:
    if isinstance(obj, pd.DataFrame):
        return None
    return Diagnostic(
        message="'sets' must be a pandas DataFrame",
        severity="error",
        check="type",
    )


def check_required_fields(df: pd.DataFrame) -> Optional[Diagnostic]:
    missing = [c for c in REQUIRED_FIELDS if c not in df.columns]
    if not missing:
        return None
    template = _ngettext(
        len(missing),
        "required field %s could not be found",
        "required fields %s could not be found",
    )
    return Diagnostic(
        message=template % _quoted(missing),
        severity="error",
        check="required_fields",
        offenders=tuple(missing),
    )


def check_size_numeric(df: pd.DataFrame) -> Optional[Diagnostic]:
    """``size`` must be finite numbers; NaN, None and inf are not sizes."""
    try:
        sizes = pd.to_numeric(df["size"], errors="raise")
    except (TypeError, ValueError):
        sizes = None
    if (
        sizes is not None
        and not sizes.isna().any()
        and np.isfinite(sizes.to_numpy(dtype=float)).all()
    ):
        return None
    return Diagnostic(
        message="field 'size' must be numeric and finite",
        severity="error",
        check="size_type",
        offenders=("size",),
    )


# ---------------------------------------------------------------------------
# Column check (repairable, works on the frame)
# ---------------------------------------------------------------------------


def drop_unknown_fields(df: pd.DataFrame) -> Tuple[pd.DataFrame, Optional[Diagnostic]]:
    """Drop columns other than ``sets``, ``size`` and ``label``."""
    known = set(REQUIRED_FIELDS) | set(OPTIONAL_FIELDS)
    unknown = [str(c) for c in df.columns if c not in known]
    if not unknown:
        return df, None
    kept = [c for c in df.columns if c in known]
    diag = _warning(
        "unknown_fields",
        unknown,
        "unknown field %s - will be dropped",
        "unknown fields %s - will be dropped",
    )
    return df.loc[:, kept], diag


# ---------------------------------------------------------------------------
# Content stages
# ---------------------------------------------------------------------------


def canonicalize(entries: List[Entry]) -> StageResult:
    """Sort the elements of every entry. Silent: ordering carries no meaning."""
    return [dataclasses.replace(e, sets=tuple(sorted(e.sets))) for e in entries], None


def reduce_duplicated_elements(entries: List[Entry]) -> StageResult:
    out: List[Entry] = []
    offenders: List[str] = []
    for e in entries:
        if len(set(e.sets)) == len(e.sets):
            out.append(e)
            continue
        offenders.append(e.render())
        # dict.fromkeys keeps first-seen order
        out.append(dataclasses.replace(e, sets=tuple(dict.fromkeys(e.sets))))
    if not offenders:
        return entries, None
    return out, _warning(
        "duplicated_elements",
        offenders,
        "set %s contains duplicated entries - will be reduced",
        "sets %s contain duplicated entries - will be reduced",
    )


def main_set_names(entries: Sequence[Entry]) -> Set[str]:
    """Identifiers declared by entries of cardinality one."""
    return {e.sets[0] for e in entries if e.is_main_set}


def restrict_to_main_sets(entries: List[Entry]) -> StageResult:
    """Remove elements that are not declared as main sets; drop emptied entries."""
    mains = main_set_names(entries)
    out: List[Entry] = []
    offenders: List[str] = []
    for e in entries:
        if e.sets and all(x in mains for x in e.sets):
            out.append(e)
            continue
        offenders.append(e.render())
        kept = tuple(x for x in e.sets if x in mains)
        if kept:
            out.append(dataclasses.replace(e, sets=kept))
    if not offenders:
        return entries, None
    return out, _warning(
        "unknown_elements",
        offenders,
        "element(s) in set %s do not appear as main sets - will be reduced",
        "element(s) in sets %s do not appear as main sets - will be reduced",
    )


def drop_duplicate_entries(entries: List[Entry]) -> StageResult:
    """Keep the first entry per unordered element set."""
    seen: Set[frozenset] = set()
    out: List[Entry] = []
    offenders: List[str] = []
    for e in entries:
        if e.key in seen:
            offenders.append(e.render())
            continue
        seen.add(e.key)
        out.append(e)
    if not offenders:
        return entries, None
    return out, _warning(
        "duplicated_sets",
        offenders,
        "set %s is not unique - will be dropped",
        "sets %s are not unique - will be dropped",
    )


def clamp_negative_sizes(entries: List[Entry]) -> StageResult:
    offenders = [e.render() for e in entries if e.size < 0]
    if not offenders:
        return entries, None
    out = [dataclasses.replace(e, size=0.0) if e.size < 0 else e for e in entries]
    return out, _warning(
        "negative_size",
        offenders,
        "size of set %s is negative - will be set to 0",
        "sizes of sets %s are negative - will be set to 0",
    )


def clamp_to_main_set_sizes(entries: List[Entry]) -> StageResult:
    """An intersection cannot be larger than the smallest set it intersects."""
    main_sizes: Dict[str, float] = {}
    for e in entries:
        if e.is_main_set:
            main_sizes.setdefault(e.sets[0], e.size)

    out: List[Entry] = []
    offenders: List[str] = []
    for e in entries:
        bounds = [main_sizes[x] for x in e.sets if x in main_sizes]
        if bounds and e.size > min(bounds):
            offenders.append(e.render())
            out.append(dataclasses.replace(e, size=min(bounds)))
        else:
            out.append(e)
    if not offenders:
        return entries, None
    return out, _warning(
        "size_bound",
        offenders,
        "size of set %s exceeds its smallest main set - will be reduced",
        "sizes of sets %s exceed their smallest main sets - will be reduced",
    )


CONTENT_STAGES: Tuple[Stage, ...] = (
    canonicalize,
    reduce_duplicated_elements,
    restrict_to_main_sets,
    drop_duplicate_entries,
    clamp_negative_sizes,
    clamp_to_main_set_sizes,
)
