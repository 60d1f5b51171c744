#!/usr/bin/env python3
"""
CrowdCred Test Suite Runner
Runs unit and integration test files one by one and summarizes the outcome
"""

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).parent

UNIT_TEST_FILES = [
    "tests/unit/test_normalize.py",
    "tests/unit/test_config.py",
    "tests/unit/test_ingest.py",
    "tests/unit/test_signals.py",
    "tests/unit/test_scorer.py",
]

INTEGRATION_TEST_FILES = [
    "tests/integration/test_full_pipeline.py",
]


def run_pytest(test_file):
    """Run pytest on a single file and return (success, stdout, stderr)"""
    env = dict(os.environ)
    # Allow running from a checkout without `pip install -e .`
    env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [str(ROOT / "src"), env.get("PYTHONPATH")])
    )
    try:
        result = subprocess.run(
            [sys.executable, "-m", "pytest", test_file, "-v"],
            capture_output=True,
            text=True,
            cwd=ROOT,
            env=env,
        )
        return result.returncode == 0, result.stdout, result.stderr
    except OSError as e:
        return False, "", str(e)


def run_group(title, test_files):
    print(f"\n{title}")
    print("-" * 50)

    passed = 0
    failed = 0

    for test_file in test_files:
        if not (ROOT / test_file).exists():
            print(f"⚠️  SKIP: {test_file} (not found)")
            continue
        print(f"Running {test_file}...")
        success, stdout, stderr = run_pytest(test_file)
        if success:
            print(f"✅ PASS: {test_file}")
            passed += 1
        else:
            print(f"❌ FAIL: {test_file}")
            print(stdout[-2000:])
            if stderr:
                print(f"Error: {stderr}")
            failed += 1

    return passed, failed


def main():
    print("=" * 60)
    print("🚀 CROWDCRED TEST SUITE EXECUTION")
    print("=" * 60)

    total_passed = 0
    total_failed = 0

    p, f = run_group("🧪 Running Unit Tests...", UNIT_TEST_FILES)
    total_passed += p
    total_failed += f

    p, f = run_group("🔗 Running Integration Tests...", INTEGRATION_TEST_FILES)
    total_passed += p
    total_failed += f

    print("\n" + "=" * 60)
    print("📊 TEST RESULTS SUMMARY")
    print("=" * 60)
    print(f"✅ TOTAL PASSED: {total_passed}")
    print(f"❌ TOTAL FAILED: {total_failed}")
    print(f"🎯 OVERALL: {'SUCCESS' if total_failed == 0 else 'FAILURE'}")

    if total_failed > 0:
        print(f"\n🔧 {total_failed} test file(s) failed - check output above for details")
        sys.exit(1)
    print("\n🎉 ALL TESTS PASSED!")
    sys.exit(0)


if __name__ == "__main__":
    main()
