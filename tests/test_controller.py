from dotwalk.controller import WalkController, _glib_timer
from dotwalk.walk import Position


def make_controller(renderer, timer, **kwargs):
    kwargs.setdefault("seed", 3)
    return WalkController(
        500, 500, 10, renderer,
        timeout_add=timer.timeout_add, source_remove=timer.source_remove,
        **kwargs,
    )


def test_start_is_idempotent(renderer, timer):
    c = make_controller(renderer, timer)
    c.start()
    c.start()
    assert c.running
    assert len(timer.sources) == 1


def test_stop_is_idempotent(renderer, timer):
    c = make_controller(renderer, timer)
    c.stop()
    assert timer.removed == []
    c.start()
    c.stop()
    c.stop()
    assert not c.running
    assert timer.sources == {}
    assert len(timer.removed) == 1


def test_ticks_produce_dots_while_running(renderer, timer):
    c = make_controller(renderer, timer)
    c.start()
    timer.fire(5)
    assert len(renderer.markers) == 5
    c.stop()
    timer.fire(5)
    assert len(renderer.markers) == 5


def test_tick_after_stop_ends_source(renderer, timer):
    c = make_controller(renderer, timer)
    c.start()
    (sid, (_interval, cb)), = timer.sources.items()
    c.stop()
    assert cb() is False


def test_interval_is_passed_to_timer(renderer, timer):
    c = make_controller(renderer, timer, interval=25)
    c.start()
    (interval, _cb), = timer.sources.values()
    assert interval == 25


def test_reset_keeps_running_and_restarts_from_center(renderer, timer):
    c = make_controller(renderer, timer)
    c.start()
    timer.fire(20)
    c.reset()
    assert renderer.markers == []
    assert c.manager.session.head is None
    assert c.running
    timer.fire()
    assert renderer.markers[0]["position"] == Position(250, 250)


def test_step_size_coercion(renderer, timer):
    c = make_controller(renderer, timer)
    assert c.change_step_size("15")
    assert c.mover.step == 15
    assert c.change_step_size(7.9)
    assert c.mover.step == 7
    assert not c.change_step_size("fast")
    assert not c.change_step_size(0)
    assert c.mover.step == 7


def test_on_tick_receives_session(renderer, timer):
    seen = []
    c = make_controller(renderer, timer, on_tick=lambda s: seen.append(len(s.trail)))
    c.start()
    timer.fire(3)
    c.reset()
    assert seen == [1, 2, 3, 0]


def test_same_seed_same_walk(timer, make_renderer):
    a, b = make_renderer(), make_renderer()
    ca = make_controller(a, timer, seed=99)
    cb = make_controller(b, timer, seed=99)
    for _ in range(50):
        ca.step_once()
        cb.step_once()
    assert [m["position"] for m in a.markers] == [m["position"] for m in b.markers]
    for m in a.markers:
        p = m["position"]
        assert 0 <= p.x <= 490 and 0 <= p.y <= 490


class _FakeGLib:
    PRIORITY_DEFAULT_IDLE = 200

    def __init__(self):
        self.calls = []
        self.removed = []

    def timeout_add(self, interval, callback, priority=0):
        self.calls.append((interval, callback, priority))
        return len(self.calls)

    def source_remove(self, sid):
        self.removed.append(sid)


def test_glib_tick_runs_below_redraw_priority(renderer):
    glib = _FakeGLib()
    timeout_add, source_remove = _glib_timer(glib)
    c = WalkController(500, 500, 10, renderer,
                       timeout_add=timeout_add, source_remove=source_remove)
    c.start()
    (interval, callback, priority), = glib.calls
    assert interval == 0
    assert callback == c._tick
    assert priority == glib.PRIORITY_DEFAULT_IDLE
    # GDK_PRIORITY_REDRAW is G_PRIORITY_HIGH_IDLE + 20 == 120
    assert priority > 120
    c.stop()
    assert glib.removed == [1]
