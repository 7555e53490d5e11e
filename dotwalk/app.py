import signal, gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk, GLib

from .canvas import DotCanvas, install_css_for_display
from .config import (
    DEFAULT_COLOR, DEFAULT_HEIGHT, DEFAULT_INTERVAL, DEFAULT_SIZE, DEFAULT_STEP, DEFAULT_WIDTH,
    PALETTE, SIZE_RANGE, STEP_RANGE, parse_args,
)
from .controller import WalkController
from .debug import debug_print

APP_ID = "io.github.dotwalk"

class DotWindow(Gtk.ApplicationWindow):
    def __init__(self, app, width, height, step, size, color, interval, seed):
        super().__init__(application=app, title="Dot Walk")
        install_css_for_display(self.get_display())
        self.set_resizable(False)

        self.canvas = DotCanvas(width, height)
        self.walk   = WalkController(
            width, height, step, self.canvas,
            color=color, size=size, interval=interval, seed=seed,
            on_tick=self._update_status,
        )

        root = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=8)
        for side in ("top", "bottom", "start", "end"):
            getattr(root, f"set_margin_{side}")(8)
        root.append(self._build_controls(step, size))
        root.append(self.canvas)
        self.status = Gtk.Label(xalign=0)
        root.append(self.status)
        self.set_child(root)
        self._update_status(self.walk.manager.session)

        self.connect("close-request", self._on_close_request)
        try:
            GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signal.SIGINT,  self._on_signal)
            GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signal.SIGTERM, self._on_signal)
        except AttributeError:
            signal.signal(signal.SIGINT,  lambda *a: GLib.idle_add(self._on_signal))
            signal.signal(signal.SIGTERM, lambda *a: GLib.idle_add(self._on_signal))

    def _build_controls(self, step, size):
        bar = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)

        for label, handler in (("Start", self.walk.start),
                               ("Stop",  self.walk.stop),
                               ("Reset", self.walk.reset)):
            btn = Gtk.Button(label=label)
            btn.connect("clicked", lambda _b, h=handler: h())
            bar.append(btn)

        bar.append(Gtk.Label(label="Step"))
        bar.append(self._slider(STEP_RANGE, step, self.walk.change_step_size))
        bar.append(Gtk.Label(label="Size"))
        bar.append(self._slider(SIZE_RANGE, size, self.walk.change_dot_size))

        for name in PALETTE:
            btn = Gtk.Button()
            btn.add_css_class("swatch")
            btn.add_css_class(name)
            btn.set_tooltip_text(name)
            btn.connect("clicked", lambda _b, n=name: self.walk.change_color(n))
            bar.append(btn)
        return bar

    def _slider(self, bounds, value, apply):
        lo, hi = bounds
        scale = Gtk.Scale.new_with_range(Gtk.Orientation.HORIZONTAL, lo, hi, 1)
        scale.set_digits(0)
        scale.set_draw_value(True)
        scale.set_size_request(120, -1)
        scale.set_value(min(max(value, lo), hi))
        scale.connect("value-changed", lambda s: apply(int(s.get_value())))
        return scale

    def _update_status(self, session):
        pos = session.position
        where = f"({pos.x:g}, {pos.y:g})" if pos else "-"
        self.status.set_text(f"dots: {len(session.trail)}   head: {where}")

    def _on_signal(self, *args):
        self.close()
        return False

    def _on_close_request(self, *args):
        self.walk.stop()
        debug_print("[app] closing")
        return False

def on_activate(app):
    cfg = getattr(app, "args", {})
    if not getattr(app, "win", None):
        app.win = DotWindow(
            app,
            width=cfg.get("width", DEFAULT_WIDTH),
            height=cfg.get("height", DEFAULT_HEIGHT),
            step=cfg.get("step", DEFAULT_STEP),
            size=cfg.get("size", DEFAULT_SIZE),
            color=cfg.get("color", DEFAULT_COLOR),
            interval=cfg.get("interval", DEFAULT_INTERVAL),
            seed=cfg.get("seed", None),
        )
        debug_print(f"[app] window created with {cfg}")
    app.win.present()

def main(argv=None):
    args = parse_args(argv)
    app = Gtk.Application(application_id=APP_ID)
    app.args = args
    app.connect("activate", on_activate)
    return app.run(None)

if __name__ == "__main__":
    main()
