#!/usr/bin/env python3
"""
Linting script for the calls-benchmark project.

Runs ruff (lint and format) and bandit through uv.
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path


def run_command(cmd: list[str], description: str) -> bool:
    """Run a command and return True if successful."""
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, check=True, capture_output=True, text=True)
        if result.stdout:
            print(result.stdout)
    except subprocess.CalledProcessError as e:
        print(f"Error: {e}")
        if e.stdout:
            print("STDOUT:", e.stdout)
        if e.stderr:
            print("STDERR:", e.stderr)
        return False
    else:
        return True


def banner(title: str) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(description="Run linting tools on src/, tests/ and scripts/")
    parser.add_argument("--fix", action="store_true", help="Apply ruff fixes and formatting")
    parser.add_argument("--security", action="store_true", help="Also run bandit on src/")
    parser.add_argument("--files", nargs="*", help="Specific files to check")

    args = parser.parse_args()
    os.chdir(Path(__file__).parent.parent)

    targets = args.files or ["src", "tests", "scripts"]
    success = True

    banner("RUFF " + ("FIX" if args.fix else "CHECK"))
    cmd = ["uv", "run", "ruff", "check", *(["--fix"] if args.fix else []), *targets]
    success = run_command(cmd, "Ruff linter") and success

    banner("RUFF FORMAT")
    cmd = ["uv", "run", "ruff", "format", *([] if args.fix else ["--check"]), *targets]
    success = run_command(cmd, "Ruff formatter") and success

    if args.security:
        banner("BANDIT")
        success = run_command(["uv", "run", "bandit", "-c", "pyproject.toml", "-r", "src"], "Bandit") and success

    if success:
        print("\n✅ All linting checks passed!")
        return 0
    print("\n❌ Some linting checks failed!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
