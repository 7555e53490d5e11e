import pytest

from dotwalk.renderer import Renderer


class FakeRenderer(Renderer):
    def __init__(self):
        self.markers = []
        self.recolors = []
        self.clears = 0

    def add_marker(self, position, color, size):
        marker = {"position": position, "color": color, "size": size}
        self.markers.append(marker)
        return marker

    def set_marker_color(self, marker, old_color, new_color):
        assert marker["color"] == old_color
        marker["color"] = new_color
        self.recolors.append((old_color, new_color))

    def clear(self):
        self.markers.clear()
        self.clears += 1


class ScriptedRandom:
    """Stands in for random.Random, replaying a fixed list of draws."""

    def __init__(self, draws):
        self._draws = list(draws)

    def randrange(self, n):
        value = self._draws.pop(0)
        assert 0 <= value < n
        return value


class FakeTimer:
    def __init__(self):
        self.sources = {}
        self.removed = []
        self._next_id = 1

    def timeout_add(self, interval, callback):
        sid = self._next_id
        self._next_id += 1
        self.sources[sid] = (interval, callback)
        return sid

    def source_remove(self, sid):
        del self.sources[sid]
        self.removed.append(sid)

    def fire(self, times=1):
        for _ in range(times):
            for sid, (_interval, cb) in list(self.sources.items()):
                if not cb():
                    self.sources.pop(sid, None)


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def make_renderer():
    return FakeRenderer


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
