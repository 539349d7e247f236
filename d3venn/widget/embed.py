"""HTML embedding of a :class:`~d3venn.widget.factory.VennWidget`.

The snippet does what an htmlwidgets binding would do:

- render once at the configured size, with a ``viewBox`` and
  ``preserveAspectRatio="xMinYMin meet"`` so the SVG scales
- on window resize, keep the aspect ratio computed at first render

Layout and drawing are left entirely to venn.js.
"""

from __future__ import annotations

import html
import json
import uuid
from pathlib import Path
from typing import Optional, Tuple, Union

from d3venn.widget.factory import VennWidget


D3_URL = "https://cdn.jsdelivr.net/npm/d3@7"
VENN_URL = "https://cdn.jsdelivr.net/npm/@upsetjs/venn.js@1"

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 400


_TEMPLATE = """\
<div id="{el_id}" class="d3venn html-widget" style="max-width: {width}px; max-height: {height}px;"></div>
<script src="{d3_url}"></script>
<script src="{venn_url}"></script>
<script>
(function() {{
  var x = {payload};
  var width = {width}, height = {height};
  var aspect = width / height;
  var el = document.getElementById("{el_id}");
  var chart = venn.VennDiagram(x.opts).width(width).height(height);
  d3.select(el).datum(x.data).call(chart);
  d3.select(el).select("svg")
    .attr("preserveAspectRatio", "xMinYMin meet")
    .attr("viewBox", "0 0 " + width + " " + height);
  window.addEventListener("resize", function() {{
    var w = el.getBoundingClientRect().width || width;
    d3.select(el).select("svg")
      .attr("width", w)
      .attr("height", Math.round(w / aspect));
  }});
}})();
</script>
"""


def resolve_size(widget: VennWidget) -> Tuple[int, int]:
    """Explicit widget size, then options, then the defaults."""
    width = widget.width or widget.options.width or DEFAULT_WIDTH
    height = widget.height or widget.options.height or DEFAULT_HEIGHT
    return int(width), int(height)


def widget_html(widget: VennWidget, element_id: Optional[str] = None) -> str:
    """Return an HTML fragment rendering ``widget`` with venn.js."""
    width, height = resolve_size(widget)
    el_id = element_id or f"d3venn-{uuid.uuid4().hex[:12]}"
    # "</" must not terminate the inline script
    payload = widget.to_json().replace("</", "<\\/")
    return _TEMPLATE.format(
        el_id=html.escape(el_id, quote=True),
        width=width,
        height=height,
        d3_url=D3_URL,
        venn_url=VENN_URL,
        payload=payload,
    )


def save_html(widget: VennWidget, path: Union[str, Path], title: str = "Venn diagram") -> Path:
    """Write a standalone HTML page and return its path."""
    p = Path(path)
    page = (
        "<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n"
        f"<title>{html.escape(title)}</title>\n</head>\n<body>\n"
        f"{widget_html(widget)}"
        "</body>\n</html>\n"
    )
    p.write_text(page, encoding="utf-8")
    return p
