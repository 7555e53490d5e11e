import abc

from .walk import Position

class Renderer(abc.ABC):
    @abc.abstractmethod
    def add_marker(self, position: Position, color: str, size: int):
        """Draw a marker at `position` and return a handle for it."""
        ...

    @abc.abstractmethod
    def set_marker_color(self, marker, old_color: str, new_color: str):
        ...

    @abc.abstractmethod
    def clear(self):
        """Remove every marker drawn so far."""
        ...
