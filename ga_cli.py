#!/usr/bin/env python3
"""
String GA CLI - Minimal entry point.

Evolves random strings toward the target string given in a YAML run
configuration and prints progress to stdout.

Usage:
    python3 ga_cli.py
    python3 ga_cli.py --config run_config.yaml
    python3 ga_cli.py --generations 5000 --history-csv out/history.csv
    python3 ga_cli.py --help
"""

import sys
from pathlib import Path

# Add project root to path if needed
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from string_ga.cli import main


if __name__ == '__main__':
    main()
