from .geometry import Point, Rect, Size, SizeProposal
from .layout import (Axis, ProportionalStack, HProportionalStack,
                     VProportionalStack, RootLayout)
from .pane import Pane
from .view import DEFAULT_PROPORTION, Frame, Spacer, View
