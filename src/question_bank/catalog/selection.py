"""Uniform random pick from a result set."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from question_bank.core.models import Record


def pick_random(results: Sequence[Record], rng: Optional[random.Random] = None) -> Optional[Record]:
    """
    Pick one record uniformly at random.

    Args:
        results: Current result set
        rng: Random source (module-level generator when None)

    Returns:
        The chosen record, or None when results is empty
    """
    if not results:
        return None
    chooser = rng or random
    return results[chooser.randrange(len(results))]
