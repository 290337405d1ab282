"""The Fisher-Yates shuffle."""

from __future__ import annotations

import random
import sys
from typing import Any, MutableSequence, Sequence


def shuffle(items: MutableSequence[Any]) -> MutableSequence[Any]:
    """Shuffle ``items`` in place uniformly at random and return it."""
    for i in range(len(items) - 1, 0, -1):
        j = random.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def main(argv: Sequence[str] | None = None) -> int:
    """Print a shuffled list of the digits 0 to 9."""
    del argv
    shuffled = shuffle(list(range(10)))
    sys.stdout.write("[" + " ".join(map(str, shuffled)) + "]\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())