import pytest

from gridwalker.controllers.greedy import GreedyController
from gridwalker.layouts import LAYOUTS
from gridwalker.render import BufferSink
from gridwalker.world import World


@pytest.fixture
def default_world():
    return World.from_layout(LAYOUTS["default"])


@pytest.fixture
def open_world():
    """
    Layout:
        #####
        #A  #      agent (1,1)
        #  G#      goal  (2,3)
        #####
    """
    return World.from_layout(LAYOUTS["open"])


@pytest.fixture
def enclosed_world():
    """Agent at (2,3) boxed in by walls on all four sides, goal at (4,5)."""
    return World.from_layout(LAYOUTS["enclosed"])


@pytest.fixture
def controller():
    return GreedyController()


@pytest.fixture
def sink():
    return BufferSink()
