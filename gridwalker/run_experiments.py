import concurrent.futures
import csv
import os

from tqdm import tqdm

from gridwalker.layouts import DEFAULT_LAYOUT, LAYOUTS, get_layout
from gridwalker.render import ConsoleSink, NullSink
from gridwalker.simulation import DEFAULT_MAX_STEPS, DEFAULT_TICK_DELAY, run_layout
from gridwalker.utils import (
    NoPathError,
    count_position_changes,
    get_col,
    get_row,
    manhattan,
    parse_layout,
    shortest_path_length,
)


def run_single_experiment(console_output=True, **kwargs):
    """Runs one simulation on a named layout.

    With console output the run is animated in the terminal exactly like the
    plain entry point; otherwise it runs headless with no delay.

    Args:
        **kwargs: A dictionary containing keys:
          - layout (str): Layout name.
          - max_steps (int): Tick limit.
          - tick_delay (float): Seconds between ticks (console only).
          - no_clear (bool): Keep the terminal scrollback instead of clearing.

    Returns:
        SimulationResult: The result of the run.
    """
    layout_name = kwargs.get("layout", DEFAULT_LAYOUT)
    max_steps = kwargs.get("max_steps", DEFAULT_MAX_STEPS)

    if console_output:
        sink = ConsoleSink(clear=not kwargs.get("no_clear", False))
        tick_delay = kwargs.get("tick_delay", DEFAULT_TICK_DELAY)
    else:
        sink = NullSink()
        tick_delay = 0

    _, result = run_layout(
        layout_name, max_steps=max_steps, tick_delay=tick_delay, sink=sink
    )
    return result


def run_experiment_config(layout_name, max_steps):
    """
    Runs a single layout headless and summarizes it.

    Args:
        layout_name (str): Layout name.
        max_steps (int): Tick limit.

    Returns:
        dict: Result row with layout, size, outcome and reference distances.
    """
    grid, start, goal = parse_layout(get_layout(layout_name))
    result = run_single_experiment(
        console_output=False, layout=layout_name, max_steps=max_steps
    )
    try:
        reference = shortest_path_length(grid, start, goal)
    except NoPathError:
        reference = None

    final = result.trajectory[-1]
    return {
        "layout": layout_name,
        "rows": grid.shape[0],
        "cols": grid.shape[1],
        "reached": result.reached,
        "steps": result.steps,
        "moves": count_position_changes(result.trajectory),
        "final_row": get_row(final),
        "final_col": get_col(final),
        "manhattan": manhattan(start, goal),
        "shortest_path": reference,
    }


def run_experiments(max_workers, **kwargs):
    """
    Runs every requested layout and collects the result rows.

    Each layout is independent, so they run in a ProcessPoolExecutor.

    Args:
        max_workers (int): Pool size.
        **kwargs: A dictionary with keys:
            - layouts (list[str], optional): Layout names; all known layouts
              when missing or empty.
            - max_steps (int): Tick limit.

    Returns:
        list[dict]: One result row per layout that ran, in completion order.
    """
    layouts = kwargs.get("layouts") or sorted(LAYOUTS)
    max_steps = kwargs.get("max_steps", DEFAULT_MAX_STEPS)
    for name in layouts:
        get_layout(name)

    results = []
    with concurrent.futures.ProcessPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(run_experiment_config, name, max_steps): name
            for name in layouts
        }
        for future in tqdm(
            concurrent.futures.as_completed(futures),
            total=len(futures),
            desc="Experiments",
        ):
            try:
                results.append(future.result())
            except Exception as e:
                print(f"Experiment failed for layout {futures[future]}: {e}")
    return results


def write_results_to_csv(results, filename):
    """Writes experiment results to a CSV file.

    Args:
        results (list[dict]): List of result dictionaries.
        filename (str): Path to the output CSV file.
    """
    if not results:
        print("No results to write.")
        return
    keys = list(results[0].keys())
    out_dir = os.path.dirname(filename)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(filename, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=keys)
        writer.writeheader()
        writer.writerows(results)
    print(f"Results written to {filename}")


def print_results(results):
    """Prints the result rows sorted by layout name."""
    for row in sorted(results, key=lambda r: r["layout"]):
        print(
            f"{row['layout']:>14}: reached={row['reached']} steps={row['steps']}"
            f" moves={row['moves']} shortest={row['shortest_path']}"
        )
