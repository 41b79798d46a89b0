#!/usr/bin/env python3
"""
Test runner for the iterating project.

Wraps pytest with unit, integration, performance and coverage modes.
"""

import os
import sys
import argparse
import subprocess
import time
from pathlib import Path
from typing import List, Optional


UNIT_TEST_FILES = [
    "test_combinators.py",
    "test_sequences.py",
    "test_peekable.py",
    "test_lazy_iterator.py",
]


class TestRunner:
    """Main test runner class with various execution modes."""

    def __init__(self, project_root: Path):
        self.project_root = project_root
        self.tests_dir = project_root / "tests"

    def run_command(self, cmd: List[str]) -> subprocess.CompletedProcess:
        """Run a command and return the result."""
        print(f"Running: {' '.join(cmd)}")
        try:
            return subprocess.run(cmd, cwd=self.project_root, timeout=300)
        except subprocess.TimeoutExpired:
            print("❌ Command timed out after 5 minutes")
            raise

    def discover_test_files(self) -> List[Path]:
        """Discover all test files in the tests directory."""
        return sorted(self.tests_dir.glob("test_*.py"))

    def _pytest(self, title: str, targets: List[str], verbose: bool, extra: Optional[List[str]] = None) -> bool:
        print(f"\n{title}")
        print("=" * 50)

        cmd = [sys.executable, "-m", "pytest"] + targets
        cmd.extend(["-v", "--tb=short"] if verbose else ["-q"])
        if extra:
            cmd.extend(extra)

        start_time = time.time()
        result = self.run_command(cmd)
        duration = time.time() - start_time
        success = result.returncode == 0

        print(f"\n⏱️  Duration: {duration:.2f} seconds")
        print("✅ Passed" if success else "❌ Failed")
        return success

    def run_unit_tests(self, verbose: bool = False, pattern: Optional[str] = None) -> bool:
        """Run unit tests for individual modules."""
        test_files = UNIT_TEST_FILES
        if pattern:
            test_files = [f for f in test_files if pattern in f]
        return self._pytest("🧪 Running Unit Tests", [str(self.tests_dir / f) for f in test_files], verbose)

    def run_integration_tests(self, verbose: bool = False) -> bool:
        return self._pytest(
            "🔗 Running Integration Tests", [str(self.tests_dir / "test_integration.py")], verbose
        )

    def run_performance_tests(self, verbose: bool = False) -> bool:
        # -s to see throughput prints
        return self._pytest(
            "⚡ Running Performance Tests", [str(self.tests_dir / "test_performance.py")], verbose, ["-s"]
        )

    def run_fast_tests(self, verbose: bool = False) -> bool:
        """Run everything except tests marked slow."""
        return self._pytest("⚡ Running Fast Tests Only", [str(self.tests_dir)], verbose, ["-m", "not slow"])

    def run_all_tests(self, verbose: bool = False) -> bool:
        return self._pytest("🚀 Running All Tests", [str(self.tests_dir)], verbose)

    def run_with_coverage(self, pattern: Optional[str] = None) -> bool:
        """Run tests with coverage analysis."""
        if pattern:
            targets = [str(p) for p in sorted(self.tests_dir.glob(f"*{pattern}*"))]
        else:
            targets = [str(self.tests_dir)]
        return self._pytest(
            "📈 Running Tests with Coverage Analysis",
            targets,
            True,
            ["--cov=iterating", "--cov=lazy_iterator", "--cov-report=term-missing", "--cov-report=html:htmlcov"],
        )

    def check_test_environment(self) -> bool:
        """Check if the test environment is properly set up."""
        print("\n🔍 Checking Test Environment")
        print("=" * 50)

        checks = []

        python_version = sys.version_info
        if python_version >= (3, 9):
            print(f"✅ Python {python_version.major}.{python_version.minor}.{python_version.micro}")
            checks.append(True)
        else:
            print(f"❌ Python version too old: {python_version}")
            checks.append(False)

        for package in ["pytest", "pytest_cov"]:
            try:
                __import__(package)
                print(f"✅ {package} available")
                checks.append(True)
            except ImportError:
                print(f"❌ {package} not available")
                checks.append(False)

        test_files = self.discover_test_files()
        if test_files:
            print(f"✅ Found {len(test_files)} test files")
            for test_file in test_files:
                print(f"   📄 {test_file.name}")
            checks.append(True)
        else:
            print("❌ No test files found")
            checks.append(False)

        all_good = all(checks)
        print("\n✅ Test environment is ready" if all_good else "\n❌ Test environment has issues")
        return all_good


def main():
    """Main entry point for the test runner."""
    parser = argparse.ArgumentParser(
        description="Test runner for the iterating project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --all                    # Run all tests
  %(prog)s --unit --verbose         # Run unit tests with verbose output
  %(prog)s --integration            # Run integration tests only
  %(prog)s --performance            # Run performance tests only
  %(prog)s --fast                   # Run everything not marked slow
  %(prog)s --coverage               # Run with coverage analysis
  %(prog)s --check                  # Check test environment
  %(prog)s --unit --pattern peek    # Run unit tests matching 'peek'
        """
    )

    parser.add_argument("--all", action="store_true", help="Run all tests")
    parser.add_argument("--unit", action="store_true", help="Run unit tests only")
    parser.add_argument("--integration", action="store_true", help="Run integration tests only")
    parser.add_argument("--performance", action="store_true", help="Run performance tests only")
    parser.add_argument("--fast", action="store_true", help="Run fast tests only (no performance)")
    parser.add_argument("--coverage", action="store_true", help="Run with coverage analysis")
    parser.add_argument("--check", action="store_true", help="Check test environment setup")
    parser.add_argument("--pattern", help="Run tests matching this pattern")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    args = parser.parse_args()

    project_root = Path(os.path.dirname(os.path.abspath(__file__)))
    runner = TestRunner(project_root)

    print("🧪 iterating Test Runner")
    print("=" * 50)
    print(f"📁 Project root: {project_root}")

    try:
        if args.check:
            success = runner.check_test_environment()
        elif args.coverage:
            success = runner.run_with_coverage(args.pattern)
        elif args.unit:
            success = runner.run_unit_tests(args.verbose, args.pattern)
        elif args.integration:
            success = runner.run_integration_tests(args.verbose)
        elif args.performance:
            success = runner.run_performance_tests(args.verbose)
        elif args.all:
            success = runner.run_all_tests(args.verbose)
        else:
            # Default: run fast tests
            print("ℹ️  No specific test mode selected, running fast tests")
            success = runner.run_fast_tests(args.verbose)
    except KeyboardInterrupt:
        print("\n⏹️  Tests interrupted by user")
        sys.exit(130)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
