import argparse
import os

import pandas as pd


def aggregate_experiment_results(
    csv_file,
    out_csv="outputs/aggregated_results.csv",
):
    """
    Reads experiment results and summarizes them per layout.

    For each layout the summary holds the success rate, the mean tick count,
    the mean number of actual moves and the gap between those moves and the
    reference shortest path. Layouts with no reachable goal have an empty gap.
    The table is printed aligned and saved to out_csv.

    Args:
        csv_file (str): Path to the CSV file with raw experiment results.
        out_csv (str, optional): Path to save the aggregated CSV. Defaults to "outputs/aggregated_results.csv".

    Returns:
        pd.DataFrame: The aggregated table.
    """
    df = pd.read_csv(csv_file)

    out_dir = os.path.dirname(out_csv)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    df["path_gap"] = df["moves"] - df["shortest_path"]

    grouped = df.groupby("layout")
    summary = pd.DataFrame(
        {
            "runs": grouped.size(),
            "success_rate": grouped["reached"].mean(),
            "steps_mean": grouped["steps"].mean(),
            "moves_mean": grouped["moves"].mean(),
            "path_gap_mean": grouped["path_gap"].mean(),
        }
    ).reset_index()

    columns = ["success_rate", "steps_mean", "moves_mean", "path_gap_mean"]
    header = f"{'layout':>14} | " + " | ".join(f"{c:>14}" for c in columns)
    print("\nPer-layout results:")
    print(header)
    print("-" * len(header))
    for _, row in summary.iterrows():
        print(
            f"{row['layout']:>14} | "
            + " | ".join(f"{row[c]:14.2f}" for c in columns)
        )

    summary.to_csv(out_csv, index=False)
    print(f"\nAggregated results saved to {out_csv}")
    return summary


def main():
    parser = argparse.ArgumentParser(
        description="Aggregate experiment results from a CSV file and save per-layout statistics."
    )
    parser.add_argument(
        "--csv_file",
        type=str,
        default="outputs/experiment_results.csv",
        help="Path to the CSV file with raw experiment results.",
    )
    parser.add_argument(
        "--out_csv",
        type=str,
        default="outputs/aggregated_results.csv",
        help="Output CSV file for aggregated results.",
    )
    args = parser.parse_args()
    aggregate_experiment_results(args.csv_file, args.out_csv)


if __name__ == "__main__":
    main()
