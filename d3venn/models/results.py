from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

import pandas as pd


Severity = Literal["warning", "error"]


class VennInputError(ValueError):
    """Raised when a set description cannot be repaired."""

    def __init__(self, diagnostics: Tuple["Diagnostic", ...]) -> None:
        self.diagnostics = tuple(diagnostics)
        msg = "Validation failed:\n" + "\n".join(f"- {d.message}" for d in self.diagnostics)
        super().__init__(msg)


class VennDataWarning(UserWarning):
    """Category for recoverable problems that were repaired automatically."""


@dataclass(frozen=True)
class Diagnostic:
    """One finding of the validator.

    Attributes
    ----------
    message:
        Human readable text, e.g. ``"set '(A, B)' is not unique - will be dropped"``.
    severity:
        ``"error"`` for structural problems (no table produced), ``"warning"``
        for problems that were repaired.
    check:
        Name of the stage that produced the finding.
    offenders:
        Offending column names or rendered entries.
    """

    message: str
    severity: Severity
    check: str
    offenders: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CheckResult:
    """Common interface of :class:`Valid`, :class:`Repaired` and :class:`Rejected`."""

    @property
    def valid(self) -> bool:
        return False

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        return ()

    @property
    def repaired(self) -> Optional[pd.DataFrame]:
        return None

    def raise_if_rejected(self) -> None:
        pass


@dataclass(frozen=True, eq=False)
class Valid(CheckResult):
    """The table passed every check; ``table`` is its canonical form."""

    table: pd.DataFrame

    @property
    def valid(self) -> bool:
        return True

    @property
    def repaired(self) -> pd.DataFrame:
        return self.table


@dataclass(frozen=True, eq=False)
class Repaired(CheckResult):
    """At least one content check fired; ``table`` holds the repaired copy."""

    warnings: Tuple[Diagnostic, ...]
    table: pd.DataFrame

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        return self.warnings

    @property
    def repaired(self) -> pd.DataFrame:
        return self.table


@dataclass(frozen=True)
class Rejected(CheckResult):
    """A structural check failed; there is no usable table."""

    errors: Tuple[Diagnostic, ...]

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        return self.errors

    @property
    def message(self) -> str:
        return "\n".join(d.message for d in self.errors)

    def raise_if_rejected(self) -> None:
        raise VennInputError(self.errors)
