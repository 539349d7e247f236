from __future__ import annotations

import json
import warnings
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from d3venn.models.entry import entries_from_table
from d3venn.models.options import VennOptions
from d3venn.models.results import Diagnostic, VennDataWarning
from d3venn.validation.validator import validate


@dataclass(frozen=True)
class VennWidget:
    """A validated Venn diagram ready to be handed to venn.js.

    Attributes
    ----------
    data:
        JSON-ready records (``{"sets": [...], "size": n, "label"?: str}``).
    options:
        Rendering configuration.
    width, height:
        Widget size in pixels; ``None`` falls back to ``options`` and then to
        the embed defaults.
    diagnostics:
        Warnings raised while repairing the input.
    """

    data: Tuple[Dict[str, Any], ...]
    options: VennOptions = VennOptions()
    width: Optional[int] = None
    height: Optional[int] = None
    diagnostics: Tuple[Diagnostic, ...] = ()

    def payload(self) -> Dict[str, Any]:
        """The object the JavaScript binding reads as ``x``."""
        return {"data": [dict(r) for r in self.data], "opts": self.options.to_dict()}

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.payload(), **kwargs)

    def _repr_html_(self) -> str:
        from d3venn.widget.embed import widget_html

        return widget_html(self)


def d3venn(
    sets: Any,
    width: Optional[int] = None,
    height: Optional[int] = None,
    *,
    options: Optional[VennOptions] = None,
) -> VennWidget:
    """Create a Venn diagram widget from a set description.

    Parameters
    ----------
    sets:
        DataFrame with one row per main set or intersection. Must contain
        ``sets`` and ``size`` and may contain ``label``. Intersections are
        given as lists of main set names.
    width, height:
        Widget size in pixels.
    options:
        Rendering configuration, see :class:`~d3venn.models.options.VennOptions`.

    Raises
    ------
    VennInputError
        If the table is structurally unusable.

    Repaired problems are reported through :func:`warnings.warn` with category
    :class:`~d3venn.models.results.VennDataWarning`, one warning per problem
    class.

    Examples
    --------
    >>> from d3venn.models import table_from_records
    >>> w = d3venn(table_from_records([
    ...     {"sets": "A", "size": 10},
    ...     {"sets": "B", "size": 10},
    ...     {"sets": ["A", "B"], "size": 2},
    ... ]))
    >>> w.payload()["data"][2]
    {'sets': ['A', 'B'], 'size': 2}
    """
    result = validate(sets)
    result.raise_if_rejected()

    for d in result.diagnostics:
        warnings.warn(d.message, VennDataWarning, stacklevel=2)

    table = result.repaired
    with_label = "label" in table.columns
    data = tuple(e.to_record(with_label=with_label) for e in entries_from_table(table))

    return VennWidget(
        data=data,
        options=options if options is not None else VennOptions(),
        width=width,
        height=height,
        diagnostics=result.diagnostics,
    )
