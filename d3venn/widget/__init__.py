"""Widget factory and HTML embedding.

The widget is thin glue: it validates the set description, reports repairs as
Python warnings and packs the repaired rows together with the rendering
options into the payload venn.js consumes.
"""

from .factory import VennWidget, d3venn
from .embed import save_html, widget_html

__all__ = [
    "VennWidget",
    "d3venn",
    "save_html",
    "widget_html",
]
