"""
CLI module for the string GA.

Handles run configuration loading, validation, and running the GA.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .data_models import GAParams, GenerationSnapshot
from .engine import DEFAULT_SEED, GeneticAlgorithm
from .evaluator import GuessEvaluator


DEFAULT_MAX_GENERATIONS = 100_000_000

GA_FIELDS = [
    'generation_size',
    'elite_count',
    'crossover_count',
    'mutated_count',
    'mutation_rate',
    'individual_size',
]


class ConfigValidationError(Exception):
    """Raised when run configuration is invalid."""
    pass


@dataclass
class RunConfig:
    """
    Validated settings for one GA run.

    Attributes:
        target: Target string the population evolves toward
        params: GA parameters
        random_seed: Seed of the run's random generator
        max_generations: Generation budget
        workers: Evaluation worker count (None for auto-detection)
        best_every: Print best candidate every N generations
        timing_every: Print step duration every N generations
        history_csv: Optional path to write recorded snapshots to
        record_every: Record every N-th snapshot for history/plot output
        plot_path: Optional path to write the convergence plot to
    """
    target: str
    params: GAParams
    random_seed: int = DEFAULT_SEED
    max_generations: int = DEFAULT_MAX_GENERATIONS
    workers: Optional[int] = None
    best_every: int = 1000
    timing_every: int = 100
    history_csv: Optional[Path] = None
    record_every: int = 1000
    plot_path: Optional[Path] = None

    @property
    def records_history(self) -> bool:
        return self.history_csv is not None or self.plot_path is not None


def load_run_config(config_path: str) -> Dict[str, Any]:
    """
    Load run configuration from YAML file.

    Args:
        config_path: Path to run configuration YAML file

    Returns:
        Dictionary containing run configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If config is invalid
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        raise ConfigValidationError("Configuration file is empty")

    if not isinstance(config, dict):
        raise ConfigValidationError("Configuration must be a mapping")

    return config


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigValidationError(f"'{name}' must be a dictionary")
    return section


def _non_negative_int(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigValidationError(f"'{field}' must be a non-negative integer, got: {value}")
    return value


def _optional_path(value: Any) -> Optional[Path]:
    return Path(value) if value else None


def validate_run_config(config: Dict[str, Any]) -> RunConfig:
    """
    Validate run configuration and convert it to a RunConfig.

    Args:
        config: Run configuration dictionary

    Returns:
        RunConfig instance

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if 'target' not in config:
        raise ConfigValidationError("Missing required field: 'target'")

    target = config['target']
    if not isinstance(target, str) or not target:
        raise ConfigValidationError("'target' must be a non-empty string")

    ga_config = _section(config, 'ga')
    unknown = set(ga_config) - set(GA_FIELDS)
    if unknown:
        raise ConfigValidationError(f"Unknown 'ga' fields: {', '.join(sorted(unknown))}")

    ga_values = {}
    for field in GA_FIELDS:
        value = ga_config.get(field)
        if value is None:
            continue
        if field == 'mutation_rate':
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigValidationError(f"'ga.mutation_rate' must be a number, got: {value}")
            ga_values[field] = float(value)
        else:
            ga_values[field] = _non_negative_int(value, f"ga.{field}")

    params = GAParams.for_target(target, **ga_values)
    try:
        params.validate()
    except ValueError as e:
        raise ConfigValidationError(f"Invalid GA parameters: {e}")

    seed = config.get('random_seed', DEFAULT_SEED)
    seed = _non_negative_int(seed, 'random_seed')

    max_generations = config.get('max_generations', DEFAULT_MAX_GENERATIONS)
    max_generations = _non_negative_int(max_generations, 'max_generations')

    workers = config.get('workers')
    if workers is not None:
        workers = _non_negative_int(workers, 'workers') or None

    reporting = _section(config, 'reporting')
    output = _section(config, 'output')

    return RunConfig(
        target=target,
        params=params,
        random_seed=seed,
        max_generations=max_generations,
        workers=workers,
        best_every=_non_negative_int(reporting.get('best_every', 1000), 'reporting.best_every'),
        timing_every=_non_negative_int(reporting.get('timing_every', 100), 'reporting.timing_every'),
        history_csv=_optional_path(output.get('history_csv')),
        record_every=_non_negative_int(output.get('record_every', 1000), 'output.record_every'),
        plot_path=_optional_path(output.get('plot')),
    )


def apply_overrides(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """
    Overlay command-line values onto a loaded run configuration.

    Args:
        config: Run configuration dictionary (not modified)
        args: Parsed command-line arguments

    Returns:
        New configuration dictionary
    """
    config = dict(config)
    output = dict(config.get('output') or {})

    if args.generations is not None:
        config['max_generations'] = args.generations
    if args.seed is not None:
        config['random_seed'] = args.seed
    if args.workers is not None:
        config['workers'] = args.workers
    if args.history_csv is not None:
        output['history_csv'] = args.history_csv
    if args.plot is not None:
        output['plot'] = args.plot

    config['output'] = output
    return config


def print_run_summary(run_config: RunConfig) -> None:
    params = run_config.params
    print(f"Target length: {len(run_config.target)}")
    print(f"Generation size: {params.generation_size}, elites: {params.elite_count}, "
          f"crossover: {params.crossover_count}, mutated: {params.mutated_count}")
    print(f"Mutation rate: {params.mutation_rate}, max individual size: {params.individual_size}")
    print(f"Generations: {run_config.max_generations}, seed: {run_config.random_seed}")


def execute_run(run_config: RunConfig) -> Optional[GenerationSnapshot]:
    """
    Run the GA described by a RunConfig and write optional outputs.

    Args:
        run_config: Validated run configuration

    Returns:
        Snapshot of the last generation, or None if no generation ran
    """
    history: Optional[List[GenerationSnapshot]] = [] if run_config.records_history else None

    with GeneticAlgorithm(
        GuessEvaluator(run_config.target),
        run_config.params,
        random_seed=run_config.random_seed,
        workers=run_config.workers,
    ) as ga:
        print(f"Evaluation workers: {ga.workers}")
        last = ga.run(
            run_config.max_generations,
            best_every=run_config.best_every,
            timing_every=run_config.timing_every,
            history=history,
            record_every=run_config.record_every,
        )

    if history is not None and run_config.history_csv is not None:
        from .io_utils import save_history_csv
        path = save_history_csv(history, run_config.history_csv)
        print(f"History saved to: {path}")

    if history and run_config.plot_path is not None:
        from .visualization_utils import plot_convergence
        import matplotlib.pyplot as plt
        fig = plot_convergence(history, save_path=run_config.plot_path)
        plt.close(fig)

    return last


def run_from_config(config_path: str, args: Optional[argparse.Namespace] = None) -> Optional[GenerationSnapshot]:
    """
    Load run configuration and run the GA.

    Args:
        config_path: Path to run configuration YAML file
        args: Optional parsed command-line arguments overriding file values

    Returns:
        Snapshot of the last generation

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If config is invalid
    """
    print(f"Loading configuration from: {config_path}")
    config = load_run_config(config_path)
    if args is not None:
        config = apply_overrides(config, args)

    print("Validating configuration...")
    run_config = validate_run_config(config)
    print_run_summary(run_config)
    print()

    return execute_run(run_config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="String GA - evolve random strings toward a target string",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 ga_cli.py                                  # Run with config.yaml
  python3 ga_cli.py --generations 5000               # Shorter run
  python3 ga_cli.py --workers 4 --seed 7             # Explicit workers and seed
  python3 ga_cli.py --history-csv out/history.csv --plot out/convergence.png
        """
    )

    parser.add_argument(
        '--config', '-c',
        default='config.yaml',
        help='Run configuration file path (default: config.yaml)'
    )

    parser.add_argument(
        '--generations', '-g',
        type=int,
        metavar='N',
        help='Number of generations to run (overrides max_generations)'
    )

    parser.add_argument(
        '--seed', '-s',
        type=int,
        help='Random seed (overrides random_seed)'
    )

    parser.add_argument(
        '--workers', '-w',
        type=int,
        metavar='N',
        help='Fitness evaluation workers (0 for hardware concurrency)'
    )

    parser.add_argument(
        '--history-csv',
        type=str,
        metavar='PATH',
        help='Write recorded generation snapshots to this CSV file'
    )

    parser.add_argument(
        '--plot',
        type=str,
        metavar='PATH',
        help='Write a convergence plot to this PNG file'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point with command-line argument parsing."""
    args = build_parser().parse_args(argv)

    try:
        run_from_config(args.config, args)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)
