from typing import Optional, Tuple

from .geometry import Point, Rect, Size, SizeProposal
from .pane import Pane

DEFAULT_PROPORTION = 1.0


class View(object):
    """A node in the view tree.

    Every view can report the size it would like for a given proposal
    (`ideal_size`) and can be told where to go (`place`). The base view is
    elastic: it takes whatever it is offered.

    `proportion` is the weight a proportional stack uses for this view when
    it shares out space among its siblings.
    """

    def __init__(self, proportion: float = DEFAULT_PROPORTION,
                 background: Optional[Tuple[int, int, int]] = None):
        self.proportion = float(proportion)
        self.pane = Pane(background=background)
        self.pane.push_handlers(self)

    def __str__(self):
        return '{}[{}]'.format(self.__class__.__name__, self.pane)

    @property
    def background(self):
        return self.pane.background

    def set_background(self, value):
        self.pane.background = value
        return self

    def set_proportion(self, value: float):
        """Sets the share of the parent stack this view should occupy.

        The final length along the stack's axis depends on the sum of the
        proportions of all the siblings that aren't fixed-size.
        """
        self.proportion = float(value)
        return self

    def frame(self, width: Optional[float] = None,
              height: Optional[float] = None) -> 'Frame':
        return Frame(self, width=width, height=height)

    def ideal_size(self, proposal: SizeProposal) -> Size:
        return proposal.replacing_unspecified_dimensions()

    def place(self, origin: Point, proposal: SizeProposal):
        self.pane.frame = Rect(origin,
                               proposal.replacing_unspecified_dimensions())

    def draw(self):
        self.pane.draw()


class Spacer(View):
    """An elastic view that only draws its background."""


class Frame(View):
    """Gives the wrapped view a fixed width and/or height.

    A dimension left as None is taken from the wrapped view's ideal size.
    Unless a proportion is given, the frame reports the wrapped view's one.
    """

    def __init__(self, content: View, width: Optional[float] = None,
                 height: Optional[float] = None,
                 proportion: Optional[float] = None, **kwargs):
        if proportion is None:
            proportion = content.proportion
        super().__init__(proportion=proportion, **kwargs)
        self.content = content
        self.width = width
        self.height = height

    def __str__(self):
        content = ''
        for line in str(self.content).split('\n'):
            content += '\n  ' + line
        return '{}[{}]({}\n)'.format(self.__class__.__name__, self.pane,
                                     content)

    def ideal_size(self, proposal: SizeProposal) -> Size:
        inner = self.content.ideal_size(SizeProposal(
            proposal.width if self.width is None else self.width,
            proposal.height if self.height is None else self.height))
        return Size(inner.width if self.width is None else self.width,
                    inner.height if self.height is None else self.height)

    def place(self, origin: Point, proposal: SizeProposal):
        size = self.ideal_size(proposal)
        self.pane.frame = Rect(origin, size)
        self.content.place(origin, SizeProposal.from_size(size))

    def on_draw(self):
        self.content.draw()
