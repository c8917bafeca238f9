import argparse
import os

import matplotlib
import numpy as np
import pandas as pd

matplotlib.use("Agg")  # use non-interactive backend
import matplotlib.pyplot as plt

from gridwalker.layouts import get_layout
from gridwalker.render import NullSink
from gridwalker.simulation import DEFAULT_MAX_STEPS, run_layout
from gridwalker.utils import parse_layout, plot_trajectory


def plot_experiment_results(csv_file, out_dir="outputs/plots"):
    """
    Reads experiment results from a CSV file and draws a grouped bar chart of
    ticks used, actual moves and the reference shortest path per layout.

    Layouts where the goal was not reached are marked with an "x" above
    their bars.

    Args:
        csv_file (str): Path to the CSV file containing experiment results.
        out_dir (str, optional): Directory to save the generated plot. Defaults to "outputs/plots".

    Returns:
        str: Path of the saved plot.
    """
    df = pd.read_csv(csv_file).sort_values("layout")
    os.makedirs(out_dir, exist_ok=True)

    layouts = list(df["layout"])
    x = np.arange(len(layouts))
    width = 0.27

    # Print aligned table
    header = f"{'layout':>14} | {'steps':>6} | {'moves':>6} | {'shortest':>8}"
    print(header)
    print("-" * len(header))
    for _, row in df.iterrows():
        print(
            f"{row['layout']:>14} | {row['steps']:>6} | {row['moves']:>6} | {row['shortest_path']:>8}"
        )

    plt.figure(figsize=(10, 6))
    plt.bar(x - width, df["steps"], width, label="ticks", color="tab:blue")
    plt.bar(x, df["moves"], width, label="moves", color="tab:green")
    plt.bar(
        x + width,
        df["shortest_path"].fillna(0),
        width,
        label="shortest path",
        color="tab:gray",
    )
    for i, reached in enumerate(df["reached"]):
        if not reached:
            plt.text(x[i], df["steps"].iloc[i] + 1, "x", ha="center", color="red")

    plt.xlabel("Layout")
    plt.ylabel("Count")
    plt.title("Greedy agent: ticks and moves per layout")
    plt.xticks(x, layouts, rotation=30)
    plt.legend()
    plt.grid(True, axis="y", alpha=0.6)
    plt.tight_layout()

    out_path = os.path.join(out_dir, "steps_per_layout.png")
    plt.savefig(out_path, dpi=150)
    plt.close()
    print(f"\nPlot saved to {out_path}")
    return out_path


def plot_layout_trajectory(
    layout_name, max_steps=DEFAULT_MAX_STEPS, out_dir="outputs/plots"
):
    """
    Runs a layout headless and saves a picture of the agent's trajectory.

    Args:
        layout_name (str): Layout name.
        max_steps (int): Tick limit.
        out_dir (str, optional): Directory to save the plot.

    Returns:
        str: Path of the saved plot.
    """
    os.makedirs(out_dir, exist_ok=True)
    grid, _, _ = parse_layout(get_layout(layout_name))
    _, result = run_layout(
        layout_name, max_steps=max_steps, tick_delay=0, sink=NullSink()
    )
    outcome = "reached" if result.reached else "not reached"
    out_path = os.path.join(out_dir, f"trajectory_{layout_name}.png")
    plot_trajectory(
        grid,
        result.trajectory,
        f"{layout_name}: {outcome} after {result.steps} steps",
        save_path=out_path,
    )
    print(f"Trajectory plot saved to {out_path}")
    return out_path


def main():
    parser = argparse.ArgumentParser(
        description="Plot experiment results from a CSV file, or the trajectory of a single layout."
    )
    parser.add_argument(
        "--csv_file",
        type=str,
        default="outputs/experiment_results.csv",
        help="Path to the CSV file containing experiment results. Defaults to outputs/experiment_results.csv.",
    )
    parser.add_argument(
        "--layout",
        type=str,
        default=None,
        help="If given, plot the trajectory of this layout instead of the CSV results.",
    )
    parser.add_argument(
        "--out_dir",
        type=str,
        default="outputs/plots",
        help="Directory to save the generated plots. Defaults to outputs/plots.",
    )
    args = parser.parse_args()
    if args.layout:
        plot_layout_trajectory(args.layout, out_dir=args.out_dir)
    else:
        plot_experiment_results(args.csv_file, args.out_dir)


if __name__ == "__main__":
    main()
