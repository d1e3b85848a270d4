import pyglet
from pyglet.event import EventDispatcher
from typing import Optional, Tuple

from .geometry import Rect


class Pane(EventDispatcher):
    """A rectangular area a view has been placed into.

    A pane remembers the frame it was last given and draws its background.
    Assigning a new frame dispatches `on_place` with the new `Rect`; `draw()`
    paints the background and dispatches `on_draw`.

    The background shape is only built on the first draw after the frame or
    the colour changed, so panes can be created and laid out without a GL
    context.
    """

    def __init__(self, frame: Rect = Rect.ZERO,
                 background: Optional[Tuple[int, int, int]] = None):
        self._frame = frame
        self._background = background
        self._background_shape = None

    def __str__(self):
        return 'Pane({}, {}, {}, {})'.format(self.x0, self.y0, self.x1,
                                             self.y1)

    @property
    def frame(self) -> Rect:
        return self._frame

    @frame.setter
    def frame(self, value: Rect):
        if value == self._frame:
            return
        self._frame = value
        self._background_shape = None
        self.dispatch_event('on_place', value)

    @property
    def background(self) -> Optional[Tuple[int, int, int]]:
        return self._background

    @background.setter
    def background(self, value: Optional[Tuple[int, int, int]]):
        self._background = value
        self._background_shape = None

    @property
    def x0(self):
        return self._frame.x0

    @property
    def y0(self):
        return self._frame.y0

    @property
    def x1(self):
        return self._frame.x1

    @property
    def y1(self):
        return self._frame.y1

    @property
    def width(self):
        return self._frame.width

    @property
    def height(self):
        return self._frame.height

    def contains(self, x, y):
        return self._frame.contains(x, y)

    def _make_background_shape(self):
        return pyglet.shapes.Rectangle(
            x=self.x0, y=self.y0, width=self.width, height=self.height,
            color=self._background)

    def draw(self):
        if self._background is not None:
            if self._background_shape is None:
                self._background_shape = self._make_background_shape()
            self._background_shape.draw()
        self.dispatch_event('on_draw')


Pane.register_event_type('on_draw')
Pane.register_event_type('on_place')
