"""Command-line validator for set description files.

Reads a JSON array of records or a CSV file, prints every diagnostic and writes
the repaired table as JSON records.

Exit codes: 0 valid, 1 repaired, 2 rejected.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from d3venn.models.entry import table_from_records
from d3venn.models.results import Rejected, Valid
from d3venn.validation.validator import validate


EXIT_VALID = 0
EXIT_REPAIRED = 1
EXIT_REJECTED = 2

_SETS_SEP = re.compile(r"\s*[&;]\s*")


def _split_sets_cell(cell: object) -> object:
    if not isinstance(cell, str):
        return cell
    parts = [p for p in _SETS_SEP.split(cell.strip()) if p]
    return parts[0] if len(parts) == 1 else parts


def read_table(path: Path, fmt: Optional[str] = None) -> pd.DataFrame:
    """Load a set description from ``.json`` or ``.csv``.

    JSON must be an array of objects. In CSV files the ``sets`` column holds
    identifiers separated by ``&`` or ``;`` (e.g. ``A&B``). A comma would end
    the CSV field, so it is not a separator.
    """
    path = Path(path)
    if fmt is None:
        fmt = path.suffix.lower().lstrip(".")
    if fmt == "json":
        records = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(records, list):
            raise ValueError(f"{path.name}: expected a JSON array of records.")
        return table_from_records(records)
    if fmt == "csv":
        df = pd.read_csv(path, dtype={"sets": str, "label": str})
        if "sets" in df.columns:
            df["sets"] = df["sets"].map(_split_sets_cell).astype(object)
        return df
    raise ValueError(f"Unknown table format: {fmt!r} (use 'json' or 'csv')")


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="python -m d3venn.validation.cli",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Validate a Venn set description and print the repaired table.

            The table needs the columns 'sets' and 'size' and may have 'label'.
            Exit code is 0 if the table is valid, 1 if it was repaired and 2 if
            it was rejected.
            """
        ),
    )
    p.add_argument(
        "table",
        help="JSON array of records or CSV file (CSV sets cells: A&B or A;B; commas need quoting and do not split)",
    )
    p.add_argument("--format", choices=("json", "csv"), default=None, help="Input format (default: from suffix)")
    p.add_argument("--out", default=None, help="Write repaired records to this file (default: stdout)")

    ns = p.parse_args(list(argv) if argv is not None else None)

    df = read_table(Path(ns.table), ns.format)
    result = validate(df)

    for d in result.diagnostics:
        print(f"[{d.severity}] {d.message}")

    if isinstance(result, Rejected):
        return EXIT_REJECTED

    records = json.loads(result.repaired.to_json(orient="records"))
    text = json.dumps(records, indent=2)
    if ns.out:
        Path(ns.out).write_text(text + "\n", encoding="utf-8")
        print(f"[info] wrote: {ns.out}")
    else:
        print(text)

    return EXIT_VALID if isinstance(result, Valid) else EXIT_REPAIRED


if __name__ == "__main__":
    raise SystemExit(main())
