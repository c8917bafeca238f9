import argparse
import json

from gridwalker.compute_results import aggregate_experiment_results
from gridwalker.layouts import DEFAULT_LAYOUT, LAYOUTS
from gridwalker.run_experiments import (
    print_results,
    run_experiments,
    run_single_experiment,
    write_results_to_csv,
)
from gridwalker.simulation import DEFAULT_MAX_STEPS, DEFAULT_TICK_DELAY


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Run the greedy grid agent on a single layout or on a batch of layouts."
    )
    parser.add_argument(
        "--mode",
        choices=["run", "experiments"],
        default="run",
        help="Mode to run. 'run' animates a single layout; 'experiments' runs layouts headless and writes a CSV.",
    )
    parser.add_argument(
        "--layout",
        choices=sorted(LAYOUTS),
        default=DEFAULT_LAYOUT,
        help="Layout to run in 'run' mode.",
    )
    parser.add_argument(
        "--max_steps", type=int, default=DEFAULT_MAX_STEPS, help="Tick limit."
    )
    parser.add_argument(
        "--tick_delay",
        type=float,
        default=DEFAULT_TICK_DELAY,
        help="Seconds between ticks in 'run' mode. 0 disables the delay.",
    )
    parser.add_argument(
        "--no_clear",
        action="store_true",
        help="Do not clear the terminal before each frame.",
    )

    # Experiment parameters (for experiments mode)
    parser.add_argument(
        "--layouts",
        type=str,
        nargs="+",
        default=None,
        help="Layouts to run in 'experiments' mode. Defaults to all layouts.",
    )
    parser.add_argument(
        "--max_workers", type=int, default=4, help="Worker processes for experiments."
    )
    parser.add_argument(
        "--output_csv",
        type=str,
        default="outputs/experiment_results.csv",
        help="Output CSV file for experiment results.",
    )
    # Optional config file
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to JSON file with run settings (overrides command-line arguments).",
    )
    return parser.parse_args(argv)


def load_config(args):
    """Overrides parsed arguments with the keys of the JSON config, if any."""
    if not args.config:
        return args
    try:
        with open(args.config, "r") as f:
            config_data = json.load(f)
        if not isinstance(config_data, dict):
            raise ValueError("top level must be a JSON object")
        for key, value in config_data.items():
            setattr(args, key, value)
        print(f"Loaded config from {args.config}")
    except (OSError, ValueError) as e:
        print(f"Failed to load config file {args.config}: {e}")
    return args


def main(argv=None):
    args = load_config(parse_args(argv))

    # Convert args to a dictionary of keyword arguments.
    kwargs = vars(args)

    if args.mode == "run":
        run_single_experiment(**kwargs)
    elif args.mode == "experiments":
        results = run_experiments(**kwargs)
        print_results(results)
        csv_file_name = kwargs["output_csv"]
        write_results_to_csv(results, csv_file_name)
        if results:
            aggregate_experiment_results(
                csv_file_name, out_csv="outputs/aggregated_results.csv"
            )
    else:
        raise ValueError(f"Unknown mode: {args.mode}")


if __name__ == "__main__":
    main()
