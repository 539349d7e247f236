from __future__ import annotations

import html
from dataclasses import dataclass
from typing import List, Optional, Tuple

import ipywidgets as w

from d3venn.models.results import CheckResult, Diagnostic, Rejected, Valid


_COLORS = {
    "error": "#b00020",    # red
    "warning": "#b26a00",  # orange
}


@dataclass
class LoggedDiagnostic:
    diagnostic: Diagnostic
    count: int = 1

    @property
    def identity(self) -> Tuple[str, str, str]:
        d = self.diagnostic
        return (d.severity, d.check, d.message)


class DiagnosticsLog:
    """
    Validator diagnostics of one or more runs, shown in a single HTML widget.

    The log keeps the :class:`~d3venn.models.results.Diagnostic` records
    themselves. A diagnostic equal in severity, check and message to the
    previous one is counted (shown as xN) instead of appended. Below the list a
    status line summarises the last result passed to :meth:`show_result`.
    """

    def __init__(self, *, title: Optional[str] = None, height_px: int = 160, max_entries: int = 500) -> None:
        self._rows: List[LoggedDiagnostic] = []
        self._status = ""
        self._height_px = int(height_px)
        self._max_entries = int(max_entries)
        self.widget = w.HTML()
        if title:
            self.panel = w.VBox([w.HTML(f"<b>{html.escape(str(title))}</b>"), self.widget])
        else:
            self.panel = self.widget
        self.clear()

    @property
    def rows(self) -> List[LoggedDiagnostic]:
        return list(self._rows)

    @property
    def status(self) -> str:
        return self._status

    def clear(self) -> None:
        self._rows = []
        self._status = ""
        self._render()

    def add(self, diagnostic: Diagnostic) -> None:
        row = LoggedDiagnostic(diagnostic)
        if self._rows and self._rows[-1].identity == row.identity:
            self._rows[-1].count += 1
        else:
            self._rows = (self._rows + [row])[-self._max_entries :]
        self._render()

    def show_result(self, result: CheckResult) -> None:
        """Append the diagnostics of ``result`` and update the status line."""
        for d in result.diagnostics:
            self.add(d)
        if isinstance(result, Rejected):
            self._status = "input rejected - nothing to draw"
        elif isinstance(result, Valid):
            self._status = f"set description is valid ({len(result.repaired)} entries)"
        else:
            self._status = f"continuing with {len(result.repaired)} repaired entries"
        self._render()

    def _render(self) -> None:
        lines = []
        for row in self._rows:
            d = row.diagnostic
            suffix = f" (x{row.count})" if row.count > 1 else ""
            lines.append(
                f"<div style='color:{_COLORS[d.severity]}; white-space:pre-wrap; font-family:monospace;'>"
                f"[{d.severity}] {html.escape(d.message)}{suffix}</div>"
            )
        if not lines:
            lines.append("<div style='color:#666;'>No diagnostics.</div>")
        if self._status:
            lines.append(f"<div style='color:#222; margin-top:4px;'><i>{html.escape(self._status)}</i></div>")

        self.widget.value = (
            f"<div style='border:1px solid #ddd; padding:8px; max-height:{self._height_px}px; "
            f"overflow-y:auto; background:#fff;'>{''.join(lines)}</div>"
        )
