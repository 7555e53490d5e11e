import gi
gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
from gi.repository import Gtk, Gdk

from .config import PALETTE
from .renderer import Renderer
from .walk import Position

def _palette_css() -> str:
    rules = [
        ".canvas { background: white; outline: 1px solid #888; }",
        ".dot { border-radius: 50%; min-width: 1px; min-height: 1px; }",
    ]
    rules += [f".dot.{name} {{ background-color: {name}; }}" for name in PALETTE]
    rules += [f".swatch.{name} {{ background: {name}; min-width: 20px; }}" for name in PALETTE]
    return "\n".join(rules)

def install_css_for_display(display: Gdk.Display):
    css  = Gtk.CssProvider()
    rule = _palette_css()
    try:
        css.load_from_data(rule, len(rule))
    except TypeError:
        css.load_from_data(rule.encode())
    Gtk.StyleContext.add_provider_for_display(
        display, css, Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
    )

class DotCanvas(Gtk.ScrolledWindow):
    """Fixed-size drawing area; markers sit in an inner Gtk.Fixed.

    The scrolled window neither shows scrollbars nor propagates the Fixed's
    size, so markers near the edge are clipped instead of growing the canvas.
    """

    def __init__(self, width: int, height: int):
        super().__init__()
        self.add_css_class("canvas")
        self.set_policy(Gtk.PolicyType.EXTERNAL, Gtk.PolicyType.EXTERNAL)
        self.set_propagate_natural_width(False)
        self.set_propagate_natural_height(False)
        self.set_size_request(width, height)
        self.set_halign(Gtk.Align.START)
        self.set_valign(Gtk.Align.START)
        self.fixed = Gtk.Fixed()
        self.set_child(self.fixed)
        self._markers = []

    def add_marker(self, position: Position, color: str, size: int):
        marker = Gtk.Box()
        marker.add_css_class("dot")
        marker.add_css_class(color)
        marker.set_size_request(size, size)
        marker.set_can_target(False)
        self.fixed.put(marker, position.x, position.y)
        self._markers.append(marker)
        return marker

    def set_marker_color(self, marker, old_color: str, new_color: str):
        marker.remove_css_class(old_color)
        marker.add_css_class(new_color)

    def clear(self):
        for marker in self._markers:
            self.fixed.remove(marker)
        self._markers.clear()

Renderer.register(DotCanvas)
