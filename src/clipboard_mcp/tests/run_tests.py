#!/usr/bin/env python3
"""
Test runner for Clipboard Vision MCP Tool

This script discovers and runs all tests for the clipboard_mcp package.
"""

import os
import sys
import time
import unittest


def run_all_tests():
    """Discover and run all tests"""
    start_time = time.time()

    print("=" * 80)
    print("Running all tests for Clipboard Vision MCP Tool")
    print("=" * 80)

    # Discover tests
    test_loader = unittest.TestLoader()
    top_level_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
    test_suite = test_loader.discover(
        os.path.dirname(os.path.abspath(__file__)),
        pattern="test_*.py",
        top_level_dir=top_level_dir,
    )

    # Run tests
    test_runner = unittest.TextTestRunner(verbosity=2)
    result = test_runner.run(test_suite)

    # Print summary
    elapsed_time = time.time() - start_time
    print("\n" + "=" * 80)
    print(f"Test Summary: {result.testsRun} tests run in {elapsed_time:.2f} seconds")
    print(f"Successes: {result.testsRun - len(result.failures) - len(result.errors)}")
    print(f"Failures: {len(result.failures)}")
    print(f"Errors: {len(result.errors)}")
    print("=" * 80)

    return 0 if result.wasSuccessful() else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
