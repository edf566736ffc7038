from __future__ import annotations

import logging
import subprocess
import sys

from finsim.app import create_app
from finsim.config import Settings


def test_engine_alone_writes_nothing_to_stdout():
    """
    Used as a library, with no app configuring logging, a solve stays silent.
    """
    code = (
        "from finsim.core.scenarios import investment, loan\n"
        "investment(amount=1000.0, period_months=12, expected_return_percent=6.0)\n"
        "loan(loan_amount=1000.0, term_months=12, annual_rate_percent=5.0)\n"
    )
    completed = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        check=True,
    )

    assert completed.stdout == ""
    assert "scenario.solved" not in completed.stderr


def test_each_app_applies_its_own_log_level():
    root = logging.getLogger()
    previous = root.level
    try:
        create_app(Settings(log_level="DEBUG"))
        assert root.level == logging.DEBUG

        create_app(Settings(log_level="ERROR"))
        assert root.level == logging.ERROR
    finally:
        root.setLevel(previous)
