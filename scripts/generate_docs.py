#!/usr/bin/env python3
"""
Generate EconSim API documentation with pdoc.

Usage:
    python scripts/generate_docs.py [--output DIR] [--no-ui]

Output:
    docs/api/ - HTML documentation (default)
"""

import argparse
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

# The Streamlit layer imports streamlit at module load; --no-ui skips it.
ENGINE_MODULES = [
    "econsim",
    "!econsim.ui",
]


def build_command(output_dir: Path, include_ui: bool = True) -> list[str]:
    modules = ["econsim"] if include_ui else ENGINE_MODULES
    return [sys.executable, "-m", "pdoc", "-o", str(output_dir), *modules]


def main(argv=None):
    """Generate API documentation for the econsim package."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--output", type=Path, default=PROJECT_ROOT / "docs" / "api")
    parser.add_argument("--no-ui", action="store_true", help="Document the engine only")
    args = parser.parse_args(argv)

    output_dir = args.output
    output_dir.mkdir(parents=True, exist_ok=True)
    cmd = build_command(output_dir, include_ui=not args.no_ui)

    print(f"Generating EconSim API documentation into {output_dir}")
    print(f"Command: {' '.join(cmd)}")

    result = subprocess.run(
        cmd,
        cwd=str(PROJECT_ROOT),
        capture_output=True,
        text=True,
    )

    if result.returncode != 0:
        print("Error generating docs:")
        print(result.stderr)
        sys.exit(1)

    if result.stdout:
        print(result.stdout)

    print(f"Done. Open {output_dir / 'index.html'} to view.")


if __name__ == "__main__":
    main()
