"""Headless tests of the ipywidgets diagnostics log."""

from __future__ import annotations

import ipywidgets as w
import pandas as pd

from d3venn.gui.diagnostics_log import DiagnosticsLog
from d3venn.models.entry import table_from_records
from d3venn.models.results import Diagnostic
from d3venn.validation.validator import validate


def _warn(message: str, check: str = "duplicated_sets") -> Diagnostic:
    return Diagnostic(message=message, severity="warning", check=check)


def test_log_widgets_created() -> None:
    log = DiagnosticsLog()
    assert isinstance(log.widget, w.HTML)
    assert log.panel is log.widget
    assert "No diagnostics." in log.widget.value

    titled = DiagnosticsLog(title="Venn <input>")
    assert isinstance(titled.panel, w.VBox)
    assert "Venn &lt;input&gt;" in titled.panel.children[0].value


def test_log_keeps_diagnostic_records() -> None:
    log = DiagnosticsLog()
    d = _warn("set '(A)' is not unique - will be dropped")
    log.add(d)
    assert [r.diagnostic for r in log.rows] == [d]


def test_log_coalesces_on_severity_check_and_message() -> None:
    log = DiagnosticsLog()
    log.add(_warn("same"))
    log.add(_warn("same"))
    log.add(_warn("same", check="size_bound"))
    log.add(Diagnostic(message="same", severity="error", check="size_bound"))
    assert [(r.diagnostic.check, r.diagnostic.severity, r.count) for r in log.rows] == [
        ("duplicated_sets", "warning", 2),
        ("size_bound", "warning", 1),
        ("size_bound", "error", 1),
    ]
    assert "(x2)" in log.widget.value


def test_log_bounded_history() -> None:
    log = DiagnosticsLog(max_entries=3)
    for i in range(5):
        log.add(_warn(f"line {i}"))
    assert [r.diagnostic.message for r in log.rows] == ["line 2", "line 3", "line 4"]


def test_log_escapes_and_colors() -> None:
    log = DiagnosticsLog()
    log.add(Diagnostic(message="<b>bad</b>", severity="error", check="type"))
    assert "&lt;b&gt;bad&lt;/b&gt;" in log.widget.value
    assert "#b00020" in log.widget.value


def test_show_result_valid() -> None:
    log = DiagnosticsLog()
    log.show_result(validate(pd.DataFrame({"sets": ["A", "B"], "size": [1, 2]})))
    assert log.rows == []
    assert log.status == "set description is valid (2 entries)"
    assert "set description is valid" in log.widget.value


def test_show_result_repaired() -> None:
    df = table_from_records([
        {"sets": "A", "size": 1},
        {"sets": "B", "size": 1},
        {"sets": ["A", "B"], "size": 5},
    ])
    log = DiagnosticsLog()
    log.show_result(validate(df))
    assert [r.diagnostic.check for r in log.rows] == ["size_bound"]
    assert "(A, B)" in log.rows[0].diagnostic.message
    assert log.status == "continuing with 3 repaired entries"


def test_show_result_rejected() -> None:
    log = DiagnosticsLog()
    log.show_result(validate("not a table"))
    assert [r.diagnostic.severity for r in log.rows] == ["error"]
    assert log.status == "input rejected - nothing to draw"


def test_show_result_twice_counts_repeats() -> None:
    log = DiagnosticsLog()
    bad = pd.DataFrame({"sets": ["A", "A"], "size": [1, 2]})
    log.show_result(validate(bad))
    log.show_result(validate(bad))
    assert [r.count for r in log.rows] == [2]


def test_clear() -> None:
    log = DiagnosticsLog()
    log.show_result(validate("x"))
    log.clear()
    assert log.rows == []
    assert log.status == ""
    assert "No diagnostics." in log.widget.value
