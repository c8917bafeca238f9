from abc import ABC, abstractmethod

from gridwalker.render import format_frame
from gridwalker.utils import AGENT, EMPTY, WALL, parse_layout


class WorldView(ABC):
    """
    The part of a world a controller is allowed to use.

    Subclasses provide the validity check, the agent and goal positions and
    the single mutation the controller performs.
    """

    @property
    @abstractmethod
    def agent_position(self):
        pass

    @property
    @abstractmethod
    def goal_position(self):
        pass

    @abstractmethod
    def is_valid(self, row, col):
        pass

    @abstractmethod
    def update_agent_position(self, old_pos, new_pos):
        pass


class World(WorldView):
    """
    Grid world holding a single agent and a single fixed goal.

    The grid is a 2D numpy array of one-character symbols. Only the agent
    marker ever moves; every other cell keeps its symbol for the whole run.
    """

    def __init__(self, grid, agent_pos, goal_pos):
        """
        Initializes the world from an already parsed grid.

        Args:
            grid (np.ndarray): 2D array of symbols. The world keeps a copy.
            agent_pos (tuple): (row, col) of the agent marker.
            goal_pos (tuple): (row, col) of the goal marker.
        """
        self.grid = grid.copy()
        self._agent = tuple(agent_pos)
        self._goal = tuple(goal_pos)

    @classmethod
    def from_layout(cls, rows):
        """
        Builds a world from layout strings.

        Raises:
            LayoutError: If the layout is malformed.
        """
        grid, agent_pos, goal_pos = parse_layout(rows)
        return cls(grid, agent_pos, goal_pos)

    @property
    def shape(self):
        return self.grid.shape

    @property
    def agent_position(self):
        return self._agent

    @property
    def goal_position(self):
        return self._goal

    def is_valid(self, row, col):
        """Returns False for out-of-bounds cells and walls, True otherwise."""
        n_rows, n_cols = self.grid.shape
        if row < 0 or row >= n_rows or col < 0 or col >= n_cols:
            return False
        return self.grid[row, col] != WALL

    def update_agent_position(self, old_pos, new_pos):
        """
        Moves the agent marker from old_pos to new_pos.

        old_pos must be the current agent cell; it is cleared without being
        checked. Does nothing if new_pos is out of bounds or a wall.
        """
        new_r, new_c = new_pos
        if not self.is_valid(new_r, new_c):
            return
        old_r, old_c = old_pos
        self.grid[old_r, old_c] = EMPTY
        self.grid[new_r, new_c] = AGENT
        self._agent = (new_r, new_c)

    def count(self, symbol):
        """Returns how many cells hold the symbol."""
        return int((self.grid == symbol).sum())

    def to_rows(self):
        """Returns the current grid as a list of strings."""
        return ["".join(row) for row in self.grid]

    def render(self, sink):
        """Hands the current frame to the sink."""
        sink.frame(format_frame(self.grid))
