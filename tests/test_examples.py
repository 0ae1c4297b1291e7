"""Smoke tests for example scripts.

These tests ensure that the example scripts run their main execution paths
without raising exceptions.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

# Determine the repo root
ROOT = Path(__file__).resolve().parents[1]


def _run(script: Path) -> subprocess.CompletedProcess:
    assert script.exists(), f"Example script not found: {script}"
    result = subprocess.run(
        [sys.executable, str(script)],
        capture_output=True,
        text=True,
        check=False,
        timeout=60,
    )
    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )
    return result


def test_direct_search_demo_runs() -> None:
    """Test that examples/direct_search_demo.py runs successfully."""
    result = _run(ROOT / "examples" / "direct_search_demo.py")

    assert "All examples completed successfully!" in result.stdout
    assert "Brent" in result.stdout


def test_linear_programming_demo_runs() -> None:
    """Test that examples/linear_programming_demo.py runs successfully."""
    result = _run(ROOT / "examples" / "linear_programming_demo.py")

    assert "All examples completed successfully!" in result.stdout
    assert "Status.INFEASIBLE" in result.stdout
    assert "Status.UNBOUNDED" in result.stdout
