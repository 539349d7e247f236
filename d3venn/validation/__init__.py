"""Validation of set descriptions.

The validator turns a user supplied frame into something venn.js can always
draw:

1) Structural problems (not a DataFrame, missing ``sets``/``size``, a
   non-numeric ``size``) reject the input outright.
2) Content problems are repaired by dropping or shrinking data, and each
   repair is reported as a warning.

Deeper semantic issues (missing lower-order intersections, under-constrained
sizes) are deliberately not checked.
"""

from .checks import CONTENT_STAGES
from .validator import validate

__all__ = [
    "CONTENT_STAGES",
    "validate",
]
