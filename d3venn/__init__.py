"""d3venn -- venn.js/D3 Venn diagrams from pandas set descriptions.

A diagram is described by a DataFrame with one row per main set or
intersection (columns ``sets``, ``size`` and optionally ``label``).

This package provides tools for:
- Validating a set description and repairing it where possible
- Reporting every repair as a structured diagnostic
- Building the widget payload (data + options) consumed by venn.js
- Embedding the diagram as HTML in notebooks or standalone pages
- Validating description files from the command line

Key principles:
- Always produce something plottable: content problems are repaired, only
  structural problems are fatal
- The validator is pure: the caller's frame is never modified
- No geometry in Python: layout and drawing belong to venn.js

Main subpackages:
- models: Data models (Entry, Diagnostic, result variants, VennOptions)
- validation: The validator pipeline and its command-line entry point
- widget: Widget factory and HTML embedding
- gui: ipywidgets diagnostics log
"""

from d3venn.models.options import VennOptions
from d3venn.models.results import VennDataWarning, VennInputError
from d3venn.validation.validator import validate
from d3venn.widget.factory import VennWidget, d3venn

__all__ = [
    "VennOptions",
    "VennDataWarning",
    "VennInputError",
    "VennWidget",
    "d3venn",
    "validate",
]
