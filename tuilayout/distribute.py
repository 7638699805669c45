"""Share a length between weighted parts."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable


@dataclass
class _Share:
    index: int
    weight: int
    size: int = 1

    def priority(self) -> int:
        # Higher priority sorts first, so the key is negated and truncated.
        return int(self.weight / math.sqrt(self.size * (self.size + 1)) * -10000.0)


def distribute_size(weights: Iterable[int], total: int) -> list[int]:
    """Distribute ``total`` over ``weights`` using the Huntington-Hill method.

    Every weight receives at least one unit and the result always sums to
    ``total``. Raises ``ValueError`` unless ``total`` exceeds the number of weights.
    """
    shares = [_Share(index, weight) for index, weight in enumerate(weights)]
    if total <= len(shares):
        raise ValueError(
            f"cannot distribute {total} over {len(shares)} weights: "
            "the total must exceed the number of weights"
        )

    for _ in range(total - len(shares)):
        # Stable sort, kept between rounds, so ties favour the earlier winner.
        shares.sort(key=_Share.priority)
        shares[0].size += 1

    shares.sort(key=lambda share: share.index)
    return [share.size for share in shares]