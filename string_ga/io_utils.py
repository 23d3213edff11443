"""
I/O utilities for the string GA.

Handles saving and loading the snapshot history of a run as CSV.
"""

import csv
from pathlib import Path
from typing import List, Union

from .data_models import GenerationSnapshot


HISTORY_COLUMNS = ["generation", "best_diff", "mean_diff", "duration_us", "best_data"]


def save_history_csv(
    snapshots: List[GenerationSnapshot],
    output_path: Union[str, Path]
) -> Path:
    """
    Save generation snapshots to a CSV file.

    CSV format:
        generation,best_diff,mean_diff,duration_us,best_data
        0,1048576.0,2210419.2,5120,"aB3..."
        ...

    Args:
        snapshots: Snapshots to save, in generation order
        output_path: Path to output CSV (parent folders are created)

    Returns:
        Path of the written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=HISTORY_COLUMNS)
        writer.writeheader()
        for snapshot in snapshots:
            writer.writerow(snapshot.to_dict())

    return output_path


def load_history_csv(csv_path: Union[str, Path]) -> List[GenerationSnapshot]:
    """
    Load generation snapshots from a CSV file.

    Args:
        csv_path: Path to CSV file written by save_history_csv

    Returns:
        List of GenerationSnapshot objects

    Raises:
        FileNotFoundError: If CSV file doesn't exist
        ValueError: If CSV format is invalid
    """
    csv_path = Path(csv_path)

    if not csv_path.exists():
        raise FileNotFoundError(f"History file not found: {csv_path}")

    with open(csv_path, 'r', newline='') as f:
        reader = csv.DictReader(f)

        if reader.fieldnames is None or not all(col in reader.fieldnames for col in HISTORY_COLUMNS):
            raise ValueError(
                f"Invalid CSV format in {csv_path}. Expected columns: {','.join(HISTORY_COLUMNS)}"
            )

        return [GenerationSnapshot.from_dict(row) for row in reader]
