"""Rendering options -- the configuration bag handed to venn.js.

:class:`VennOptions` groups everything that affects how the diagram is drawn
into one frozen dataclass. It can be:

- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to the option names venn.js expects via :meth:`VennOptions.to_dict`
- Rebuilt from such a dict via :meth:`VennOptions.from_dict`
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


# Python field name -> venn.js option name
_JS_NAMES: Dict[str, str] = {
    "fill_colors": "colourScheme",
    "text_color": "textFill",
    "center_text": "symmetricalTextCentre",
    "width": "width",
    "height": "height",
}


@dataclass(frozen=True)
class VennOptions:
    """Frozen rendering configuration.

    Fields
    ------
    fill_colors : tuple of str or None
        Fill color per set, in table order. ``None`` keeps the venn.js palette.
    text_color : str or None
        Color of the set labels.
    center_text : bool
        If True, labels are centred symmetrically inside their region.
    width, height : int or None
        Chart size in pixels. ``None`` lets the widget container decide.
    """

    fill_colors: Optional[Tuple[str, ...]] = None
    text_color: Optional[str] = None
    center_text: bool = False
    width: Optional[int] = None
    height: Optional[int] = None

    def __post_init__(self) -> None:
        if self.fill_colors is not None:
            # Callers may pass a list
            if not isinstance(self.fill_colors, tuple):
                object.__setattr__(self, "fill_colors", tuple(self.fill_colors))
            for c in self.fill_colors:
                _check_color("fill_colors", c)
        if self.text_color is not None:
            _check_color("text_color", self.text_color)
        for name in ("width", "height"):
            v = getattr(self, name)
            if v is None:
                continue
            if isinstance(v, bool) or not isinstance(v, int) or v <= 0:
                raise ValueError(f"{name} must be a positive integer number of pixels, got {v!r}")

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return venn.js option names; unset values are omitted."""
        d: Dict[str, Any] = {}
        for field, js in _JS_NAMES.items():
            v = getattr(self, field)
            if v is None:
                continue
            if field == "center_text" and not v:
                continue
            d[js] = list(v) if field == "fill_colors" else v
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> VennOptions:
        """Reconstruct from a dict produced by :meth:`to_dict`."""
        by_js = {js: field for field, js in _JS_NAMES.items()}
        kwargs: Dict[str, Any] = {}
        for k, v in d.items():
            if k not in by_js:
                raise ValueError(f"Unknown venn.js option: {k!r}")
            kwargs[by_js[k]] = v
        if kwargs.get("fill_colors") is not None:
            kwargs["fill_colors"] = tuple(kwargs["fill_colors"])
        return cls(**kwargs)


def _check_color(name: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must contain non-empty color strings, got {value!r}")
