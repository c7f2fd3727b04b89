#!/usr/bin/env python3
"""
Test runner for TuneBridge - runs each test script from its directory
"""

import sys
import os
import subprocess
import argparse

TEST_DIRS = [
    "tests/unit",
    "tests/integration",
]

def run_test_file(test_path):
    """Run a specific test file"""
    print(f"Running: {test_path}")
    result = subprocess.run([sys.executable, test_path], capture_output=False)
    return result.returncode == 0

def run_tests_in(test_dirs):
    """Run every test_*.py script in the given directories"""
    all_passed = True

    for test_dir in test_dirs:
        if not os.path.exists(test_dir):
            continue
        print(f"\n{'='*50}")
        print(f"Running tests in: {test_dir}")
        print(f"{'='*50}")

        for file in sorted(os.listdir(test_dir)):
            if file.endswith('.py') and file.startswith('test_'):
                test_path = os.path.join(test_dir, file)
                if run_test_file(test_path):
                    print(f"✅ {file} PASSED")
                else:
                    all_passed = False
                    print(f"❌ {file} FAILED")

    return all_passed

def main():
    parser = argparse.ArgumentParser(description='Run TuneBridge tests')
    parser.add_argument('--test', help='Run specific test file')
    parser.add_argument('--unit', action='store_true', help='Run unit tests only')

    args = parser.parse_args()

    if args.test:
        if not os.path.exists(args.test):
            print(f"Test file not found: {args.test}")
            sys.exit(1)
        sys.exit(0 if run_test_file(args.test) else 1)

    success = run_tests_in(TEST_DIRS[:1] if args.unit else TEST_DIRS)
    if success:
        print("\n🎉 All tests passed!")
    else:
        print("\n❌ Some tests failed!")
    sys.exit(0 if success else 1)

if __name__ == "__main__":
    main()
