"""Named literal layouts.

Every layout is a tuple of equal-length strings using the symbols
"#" (wall), " " (empty), "A" (agent) and "G" (goal).
"""

DEFAULT_LAYOUT = "default"

LAYOUTS = {
    # Agent starts at (1, 1), goal at (4, 8).
    "default": (
        "##########",
        "#A  #    #",
        "# # # ## #",
        "# #      #",
        "# #### #G#",
        "#    #   #",
        "##########",
    ),
    "open": (
        "#####",
        "#A  #",
        "#  G#",
        "#####",
    ),
    # Row move blocked at the start, fallback steps right.
    "detour_right": (
        "#####",
        "#A  #",
        "##  #",
        "#  G#",
        "#####",
    ),
    # Row move blocked at the start, fallback steps left.
    "detour_left": (
        "#####",
        "#  A#",
        "#  ##",
        "#G  #",
        "#####",
    ),
    # Row already aligned, column move blocked: no fallback applies.
    "column_wall": (
        "#######",
        "#A # G#",
        "#     #",
        "#######",
    ),
    "enclosed": (
        "#######",
        "# ### #",
        "# #A# #",
        "# ### #",
        "#    G#",
        "#######",
    ),
}


def get_layout(name):
    """
    Returns the rows of a named layout.

    Raises:
        ValueError: If no layout has that name.
    """
    try:
        return LAYOUTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown layout: {name} (choose from {', '.join(sorted(LAYOUTS))})"
        ) from None
