from typing import NamedTuple, Optional


class Point(NamedTuple):
    x: float
    y: float


Point.ZERO = Point(0, 0)


class Size(NamedTuple):
    width: float
    height: float


Size.ZERO = Size(0, 0)


class Rect(NamedTuple):
    """An axis-aligned rectangle given by its origin and size."""

    origin: Point
    size: Size

    def __str__(self):
        return 'Rect({}, {}, {}, {})'.format(self.x0, self.y0, self.width,
                                             self.height)

    @property
    def x0(self) -> float:
        return self.origin.x

    @property
    def y0(self) -> float:
        return self.origin.y

    @property
    def x1(self) -> float:
        return self.origin.x + self.size.width

    @property
    def y1(self) -> float:
        return self.origin.y + self.size.height

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    def contains(self, x, y):
        return self.x0 <= x < self.x1 and self.y0 <= y < self.y1


Rect.ZERO = Rect(Point.ZERO, Size.ZERO)


class SizeProposal(NamedTuple):
    """The space a parent offers to a child.

    Either dimension may be None, meaning the parent doesn't constrain it.
    """

    width: Optional[float] = None
    height: Optional[float] = None

    @classmethod
    def from_size(cls, size: Size) -> 'SizeProposal':
        return cls(size.width, size.height)

    def replacing_unspecified_dimensions(self, default: Size = None) -> Size:
        """Returns a concrete size, taking missing dimensions from `default`.

        If `default` is omitted, a 10x10 size is used.
        """
        if default is None:
            default = DEFAULT_UNSPECIFIED_SIZE
        return Size(default.width if self.width is None else self.width,
                    default.height if self.height is None else self.height)


DEFAULT_UNSPECIFIED_SIZE = Size(10, 10)

SizeProposal.ZERO = SizeProposal(0, 0)
SizeProposal.INFINITY = SizeProposal(float('inf'), float('inf'))
SizeProposal.UNSPECIFIED = SizeProposal(None, None)
