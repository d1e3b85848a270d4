import enum
import logging
from typing import List, Optional, Sequence

from .geometry import DEFAULT_UNSPECIFIED_SIZE, Point, Rect, Size, SizeProposal
from .view import View

logger = logging.getLogger(__name__)


class Axis(enum.Enum):
    HORIZONTAL = 1
    VERTICAL = 2

    def length(self, size):
        """Returns the component of `size` along this axis.

        Works for both `Size` and `SizeProposal`; the latter may give None.
        """
        if self is Axis.HORIZONTAL:
            return size.width
        else:
            return size.height

    def with_length(self, size: Size, length: float) -> Size:
        """Returns `size` with its component along this axis replaced."""
        if self is Axis.HORIZONTAL:
            return Size(length, size.height)
        else:
            return Size(size.width, length)

    def advance(self, origin: Point, size: Size) -> Point:
        """Moves `origin` past `size` along this axis."""
        if self is Axis.HORIZONTAL:
            return Point(origin.x + size.width, origin.y)
        else:
            return Point(origin.x, origin.y + size.height)


class ProportionalStack(View):
    """A stack that shares out its length among its children by proportion.

    Along the stack's axis each child receives a slice of the available
    length proportional to its `proportion`, relative to the sum of the
    proportions of its siblings. The cross axis is passed through unchanged.

    A child whose ideal length under the stack's proposal is strictly
    smaller than the proposed length is treated as fixed-size: it keeps its
    ideal size and the remaining children share what's left. A child asking
    for at least the proposed length would take everything anyway, so it is
    put into the proportional pool instead of being given what it asks for.

    This is a heuristic. A child that wants to stretch but happens to report
    a smaller size for some proposal will be kept at that size.

    Nothing is clamped. If the fixed children need more than the stack has,
    the flexible ones end up with negative lengths.
    """

    def __init__(self, axis: Axis, *children: View,
                 honor_fixed_sizes: bool = True,
                 unspecified_size: Size = DEFAULT_UNSPECIFIED_SIZE,
                 **kwargs):
        if not isinstance(axis, Axis):
            raise ValueError('Unknown axis: {!r}'.format(axis))
        super().__init__(**kwargs)
        self.axis = axis
        self.children: Sequence[View] = children
        self.honor_fixed_sizes = honor_fixed_sizes
        self.unspecified_size = unspecified_size

    def __str__(self):
        content = ''
        for child in self.children:
            for line in str(child).split('\n'):
                content += '\n  ' + line
            content += ','
        content += '\n'

        return '{}[{}]({})'.format(self.__class__.__name__, self.pane, content)

    def size_that_fits(self, proposal: SizeProposal) -> Size:
        """The stack claims all the space it's offered."""
        return proposal.replacing_unspecified_dimensions(self.unspecified_size)

    def _is_fixed(self, length: float, proposal: SizeProposal) -> bool:
        if not self.honor_fixed_sizes:
            return False
        proposed_length = self.axis.length(proposal)
        if proposed_length is None:
            proposed_length = 0
        return length < proposed_length

    def place_subviews(self, bounds: Rect, proposal: SizeProposal,
                       children: Optional[Sequence[View]] = None):
        """Places every child inside `bounds`, one after another.

        Each child's `place` is called exactly once, in order, starting at
        `bounds.origin` and moving along the axis by the size each child
        was given.
        """
        if children is None:
            children = self.children

        ideal_sizes: List[Size] = [
            child.ideal_size(proposal) for child in children]
        fixed = [self._is_fixed(self.axis.length(size), proposal)
                 for size in ideal_sizes]

        total_fixed_size = sum(
            self.axis.length(size)
            for size, is_fixed in zip(ideal_sizes, fixed) if is_fixed)
        remaining_space = self.axis.length(bounds.size) - total_fixed_size
        usable_size = self.axis.with_length(bounds.size, remaining_space)
        total_size_factor = sum(
            child.proportion
            for child, is_fixed in zip(children, fixed) if not is_fixed)

        logger.debug('%s: placing %d children in %s, fixed %s, remaining %s, '
                     'size factor %s', self.axis.name, len(children), bounds,
                     total_fixed_size, remaining_space, total_size_factor)
        if total_size_factor == 0 and not all(fixed):
            logger.warning('%s: flexible children have a total proportion of '
                           '0, collapsing them', self.axis.name)

        origin = bounds.origin
        for child, ideal_size, is_fixed in zip(children, ideal_sizes, fixed):
            if is_fixed:
                size = ideal_size
            elif total_size_factor == 0:
                size = self.axis.with_length(usable_size, 0.0)
            else:
                size = self.axis.with_length(
                    usable_size,
                    remaining_space * (child.proportion / total_size_factor))

            child.place(origin, SizeProposal.from_size(size))
            origin = self.axis.advance(origin, size)

    def ideal_size(self, proposal: SizeProposal) -> Size:
        return self.size_that_fits(proposal)

    def place(self, origin: Point, proposal: SizeProposal):
        bounds = Rect(origin, self.size_that_fits(proposal))
        self.pane.frame = bounds
        self.place_subviews(bounds, proposal)

    def on_draw(self):
        for child in self.children:
            child.draw()


class HProportionalStack(ProportionalStack):
    def __init__(self, *args, **kwargs):
        super().__init__(Axis.HORIZONTAL, *args, **kwargs)


class VProportionalStack(ProportionalStack):
    def __init__(self, *args, **kwargs):
        super().__init__(Axis.VERTICAL, *args, **kwargs)


class RootLayout(object):
    """Lays out a view tree over the whole of a pyglet window.

    The child is re-placed every time the window is resized and drawn every
    time the window is drawn.
    """

    def __init__(self, window, child: View = None):
        self.window = window
        self._child = child
        window.push_handlers(self)
        self._place_child()

    def __str__(self):
        content = ''
        if self.child is not None:
            content = '\n'
            for line in str(self.child).split('\n'):
                content += '  ' + line + '\n'

        return 'RootLayout({})'.format(content)

    @property
    def child(self) -> View:
        return self._child

    @child.setter
    def child(self, value: View):
        self._child = value
        self._place_child()

    def _place_child(self, width=None, height=None):
        if self._child is None:
            return
        if width is None:
            width, height = self.window.width, self.window.height
        self._child.place(Point.ZERO, SizeProposal(width, height))

    def on_draw(self):
        if self._child is not None:
            self._child.draw()

    def on_resize(self, width, height):
        self._place_child(width, height)
