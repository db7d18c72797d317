#!/usr/bin/env python3
"""
Test runner script for the bounded-cache project.

Wraps pytest with shortcuts for the unit / integration split and coverage.
"""

import sys
import subprocess
import argparse
from pathlib import Path


def check_venv():
    """Check if virtual environment is activated."""
    if not (hasattr(sys, 'base_prefix') and sys.base_prefix != sys.prefix):
        print("WARNING: Virtual environment is not activated!")
        print("   Please run: . ./venv/bin/activate")
        print("   Then install dependencies: pip install -e '.[test]'")
        return False
    return True


def check_dependencies():
    """Check if required dependencies are installed."""
    try:
        import pytest  # noqa: F401
        return True
    except ImportError:
        print("ERROR: pytest is not installed!")
        print("   Please run: pip install -e '.[test]'")
        return False


def run_command(cmd, description):
    """Run a command and stream its result."""
    print(f"RUNNING: {description}")
    print(f"   Command: {' '.join(cmd)}")

    try:
        result = subprocess.run(cmd, check=True, capture_output=True, text=True)
        print("SUCCESS!")
        if result.stdout:
            print(result.stdout)
        return True
    except subprocess.CalledProcessError as e:
        print(f"FAILED with exit code {e.returncode}")
        if e.stdout:
            print("STDOUT:", e.stdout)
        if e.stderr:
            print("STDERR:", e.stderr)
        return False


def main():
    parser = argparse.ArgumentParser(description="Run tests for bounded-cache")
    parser.add_argument("--unit", action="store_true", help="Run only unit tests")
    parser.add_argument("--integration", action="store_true", help="Run only integration tests")
    parser.add_argument("--fast", action="store_true", help="Run only fast tests (exclude slow)")
    parser.add_argument("--coverage", action="store_true", help="Run with coverage report")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--file", help="Run specific test file")
    parser.add_argument("--test", help="Run tests matching a keyword expression")

    args = parser.parse_args()

    print("bounded-cache Test Runner")
    print("=" * 50)

    if not check_venv():
        sys.exit(1)

    if not check_dependencies():
        sys.exit(1)

    cmd = [sys.executable, "-m", "pytest"]

    if args.verbose:
        cmd.append("-v")

    if args.coverage:
        cmd.extend(["--cov=bounded_cache", "--cov-report=term-missing"])

    if args.unit:
        cmd.extend(["-m", "unit"])
    elif args.integration:
        cmd.append(str(Path("tests/integration")))
    elif args.fast:
        cmd.extend(["-m", "not slow"])

    if args.file:
        cmd.append(args.file)
    if args.test:
        cmd.extend(["-k", args.test])

    if not any([args.unit, args.integration, args.fast, args.file]):
        cmd.append(str(Path("tests")))

    success = run_command(cmd, "Running tests")

    if success:
        print("\nAll tests completed successfully!")
        print("\nAvailable test commands:")
        print("   python run_tests.py --unit          # Run unit tests only")
        print("   python run_tests.py --integration   # Run threaded integration tests")
        print("   python run_tests.py --coverage      # Run with coverage report")
        print("   python run_tests.py --file tests/test_bounded_cache.py")
        print("   python run_tests.py --test purge")
    else:
        sys.exit(1)


if __name__ == "__main__":
    main()
