import random

from .config import DEFAULT_COLOR, DEFAULT_INTERVAL, DEFAULT_SIZE, coerce_positive_int
from .debug import debug_print
from .manager import DotManager
from .walk import DotMover


def _glib_timer(glib=None):
    """GLib timer functions for the walk tick.

    The tick runs below GDK_PRIORITY_REDRAW so that a 0 ms interval still
    lets the frame clock lay out and paint between ticks.
    """
    if glib is None:
        import gi
        gi.require_version("GLib", "2.0")
        from gi.repository import GLib as glib
    priority = glib.PRIORITY_DEFAULT_IDLE

    def timeout_add(interval, callback):
        return glib.timeout_add(interval, callback, priority=priority)

    return timeout_add, glib.source_remove


class WalkController:
    """Drives a DotManager from a main-loop timer.

    `timeout_add(interval_ms, callback)` must return a source id and keep
    calling `callback` while it returns True; `source_remove(id)` cancels it.
    Both default to GLib's.
    """

    def __init__(self, width, height, step, renderer, *,
                 color=DEFAULT_COLOR, size=DEFAULT_SIZE, interval=DEFAULT_INTERVAL,
                 seed=None, timeout_add=None, source_remove=None, on_tick=None):
        if timeout_add is None or source_remove is None:
            timeout_add, source_remove = _glib_timer()
        self.mover    = DotMover(step, width, height, rng=random.Random(seed))
        self.manager  = DotManager(width, height, self.mover, renderer, color=color, size=size)
        self.interval = interval
        self.on_tick  = on_tick
        self._timeout_add   = timeout_add
        self._source_remove = source_remove
        self._timer_id = None

    @property
    def running(self) -> bool:
        return self._timer_id is not None

    def start(self):
        if self._timer_id is not None:
            return
        self._timer_id = self._timeout_add(self.interval, self._tick)
        debug_print(f"[walk] start interval={self.interval}ms")

    def stop(self):
        if self._timer_id is None:
            return
        self._source_remove(self._timer_id)
        self._timer_id = None
        debug_print("[walk] stop")

    def reset(self):
        self.manager.reset_dots()
        if self.on_tick:
            self.on_tick(self.manager.session)

    def step_once(self):
        self.manager.create_dot()
        if self.on_tick:
            self.on_tick(self.manager.session)

    def _tick(self):
        if self._timer_id is None:
            return False
        self.step_once()
        return True

    def change_step_size(self, value) -> bool:
        n = coerce_positive_int(value)
        if n is None:
            debug_print(f"[walk] ignoring step size {value!r}")
            return False
        self.mover.change_step_size(n)
        debug_print(f"[walk] step -> {n}")
        return True

    def change_dot_size(self, value) -> bool:
        return self.manager.change_dot_size(value)

    def change_color(self, name) -> bool:
        return self.manager.change_color(name)
