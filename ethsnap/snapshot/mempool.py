"""
Synthetic mempool figures.

Public RPC endpoints don't expose the pending pool (``txpool_*``
methods need a node you control), so the numbers produced here are
MOCK DATA. They exist so that the dashboard has something to render.
Nothing in this module looks at real pending transactions.
"""

import logging
import random

from ethsnap.snapshot.models import MempoolStats

PENDING_COUNT_RANGE = (10_000, 60_000)
TOTAL_VALUE_RANGE = (50.0, 150.0)

logger = logging.getLogger(__name__)


def simulate_mempool_stats(gas_price: str, rng: random.Random | None = None) -> MempoolStats:
    """
    Generate placeholder mempool stats.

    Args:
        gas_price: real current gas price in gwei, copied as the average
        rng: random generator, module ``random`` if ``None``

    Returns:
        Randomized :class:`MempoolStats`
    """
    rng = rng or random
    low, high = PENDING_COUNT_RANGE
    value_low, value_high = TOTAL_VALUE_RANGE
    stats = MempoolStats(
        pending_count=int(rng.random() * (high - low) + low),
        avg_gas_price=gas_price,
        total_value=f"{rng.random() * (value_high - value_low) + value_low:.2f}",
    )
    logger.debug("Using simulated mempool stats: %s", stats)
    return stats
