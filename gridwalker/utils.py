import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

WALL = "#"
EMPTY = " "
AGENT = "A"
GOAL = "G"

SYMBOLS = (WALL, EMPTY, AGENT, GOAL)


class LayoutError(ValueError):
    """Raised when a layout cannot be turned into a world."""

    pass


class NoPathError(Exception):
    """Raised when the goal cannot be reached from the agent's cell at all."""

    pass


# Helper functions for raw position tuples.
def get_row(pos):
    """Returns the row of the position."""
    return pos[0]


def get_col(pos):
    """Returns the column of the position."""
    return pos[1]


def manhattan(a, b):
    """Returns the Manhattan distance between two (row, col) positions."""
    return abs(get_row(a) - get_row(b)) + abs(get_col(a) - get_col(b))


def parse_layout(rows):
    """
    Converts a sequence of equal-length strings into a symbol grid.

    Args:
        rows (Sequence[str]): One string per grid row.

    Returns:
        tuple: (grid, agent_pos, goal_pos) where grid is a 2D numpy array of
            one-character strings.

    Raises:
        LayoutError: If the layout is empty, ragged, uses unknown symbols, or
            does not hold exactly one agent and one goal.
    """
    rows = list(rows)
    if not rows or not rows[0]:
        raise LayoutError("Layout is empty")
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise LayoutError(
                f"Row {i} has {len(row)} cells, expected {width} (ragged layout)"
            )
        unknown = set(row) - set(SYMBOLS)
        if unknown:
            raise LayoutError(f"Row {i} has unknown symbols: {sorted(unknown)}")

    grid = np.array([list(row) for row in rows], dtype="<U1")
    agents = find_symbol(grid, AGENT)
    goals = find_symbol(grid, GOAL)
    if len(agents) != 1:
        raise LayoutError(f"Layout needs exactly one agent, found {len(agents)}")
    if len(goals) != 1:
        raise LayoutError(f"Layout needs exactly one goal, found {len(goals)}")
    return grid, agents[0], goals[0]


def find_symbol(grid, symbol):
    """Returns the (row, col) positions holding the symbol, in row-major order."""
    return [(int(r), int(c)) for r, c in np.argwhere(grid == symbol)]


def grid_to_graph(grid):
    """
    Builds an undirected 4-neighbour graph over the non-wall cells.

    Args:
        grid (np.ndarray): Symbol grid.

    Returns:
        nx.Graph: Nodes are (row, col) tuples, every edge has cost "l" = 1.
    """
    n_rows, n_cols = grid.shape
    G = nx.grid_2d_graph(n_rows, n_cols)
    walls = [tuple(map(int, rc)) for rc in np.argwhere(grid == WALL)]
    G.remove_nodes_from(walls)
    nx.set_edge_attributes(G, 1, "l")
    return G


def shortest_path_length(grid, start, goal):
    """
    Computes the length of the shortest 4-neighbour path from start to goal.

    Only used as a reference for reporting; the agent never plans with it.

    Raises:
        NoPathError: If goal is not reachable from start.
    """
    G = grid_to_graph(grid)
    try:
        return nx.shortest_path_length(G, start, goal, weight="l")
    except (nx.NetworkXNoPath, nx.NodeNotFound) as e:
        raise NoPathError(f"No path from {start} to {goal}") from e


def count_position_changes(trajectory):
    """Returns how many consecutive trajectory entries differ."""
    return sum(1 for a, b in zip(trajectory, trajectory[1:]) if a != b)


def plot_trajectory(grid, trajectory, title, save_path=None):
    """
    Draws the grid with the agent's trajectory on top.

    Walls are dark cells, the start is a green dot and the goal a red star.

    Args:
        grid (np.ndarray): Symbol grid (the initial layout).
        trajectory (list[tuple]): Agent positions, one per tick.
        title (str): Title for the plot.
        save_path (str, optional): Where to save the figure. If None, the
            figure is shown instead.
    """
    walls = (grid == WALL).astype(float)
    fig, ax = plt.subplots(
        figsize=(grid.shape[1] * 0.6 + 1, grid.shape[0] * 0.6 + 1)
    )
    ax.imshow(walls, cmap="Greys", vmin=0, vmax=1.5)

    rows = [get_row(p) for p in trajectory]
    cols = [get_col(p) for p in trajectory]
    ax.plot(cols, rows, "-o", color="tab:blue", markersize=4, linewidth=1.5)
    ax.plot(cols[0], rows[0], "o", color="tab:green", markersize=10, label="start")

    goal = find_symbol(grid, GOAL)
    if goal:
        ax.plot(
            get_col(goal[0]),
            get_row(goal[0]),
            "*",
            color="tab:red",
            markersize=14,
            label="goal",
        )

    ax.set_xticks(range(grid.shape[1]))
    ax.set_yticks(range(grid.shape[0]))
    ax.set_title(title)
    ax.legend(loc="upper right", fontsize=8)
    if save_path:
        fig.savefig(save_path, dpi=150)
        plt.close(fig)
    else:
        plt.show()

