from dataclasses import dataclass, field
from typing import Any, List, Optional

from .config import DEFAULT_COLOR, DEFAULT_SIZE, coerce_positive_int, is_palette_color
from .debug import debug_print
from .renderer import Renderer
from .walk import DotMover, Position


@dataclass
class Dot:
    position: Position
    color: str
    size: int
    marker: Any = None


@dataclass
class WalkSession:
    color: str = DEFAULT_COLOR
    size: int = DEFAULT_SIZE
    head: Optional[Dot] = None
    trail: List[Dot] = field(default_factory=list)

    @property
    def position(self) -> Optional[Position]:
        return self.head.position if self.head else None


class DotManager:
    def __init__(self, width: float, height: float, mover: DotMover, renderer: Renderer,
                 color: str = DEFAULT_COLOR, size: int = DEFAULT_SIZE):
        self.width    = width
        self.height   = height
        self.mover    = mover
        self.renderer = renderer
        self.session  = WalkSession(color=color, size=size)

    def create_dot(self) -> Dot:
        s = self.session
        if s.head is None:
            pos = Position(self.width / 2, self.height / 2)
        else:
            pos = self.mover.get_new_position(s.head.position)
            if s.head.color != s.color:
                self.renderer.set_marker_color(s.head.marker, s.head.color, s.color)
                s.head.color = s.color
        dot = Dot(pos, s.color, s.size)
        dot.marker = self.renderer.add_marker(pos, dot.color, dot.size)
        s.trail.append(dot)
        s.head = dot
        return dot

    def reset_dots(self):
        self.renderer.clear()
        self.session.trail.clear()
        self.session.head = None
        debug_print("[manager] reset")

    def change_color(self, name: str) -> bool:
        if not is_palette_color(name):
            debug_print(f"[manager] ignoring unknown color {name!r}")
            return False
        self.session.color = name
        debug_print(f"[manager] color -> {name}")
        return True

    def change_dot_size(self, value) -> bool:
        n = coerce_positive_int(value)
        if n is None:
            debug_print(f"[manager] ignoring dot size {value!r}")
            return False
        self.session.size = n
        debug_print(f"[manager] size -> {n}")
        return True
