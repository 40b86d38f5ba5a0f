#!/usr/bin/env python3
"""Run the Question Bank Browser from a source checkout.

    python run_browser.py [path-or-url-to-questions.json]

Without an argument the catalog comes from $QUESTION_BANK_SOURCE, then
workspace/data/questions.json.
"""
import sys
from pathlib import Path

_SRC = Path(__file__).resolve().parent / "src"
if _SRC.is_dir():
    sys.path.insert(0, str(_SRC))

from question_bank.gui.app import run  # noqa: E402

if __name__ == "__main__":
    sys.exit(run())
