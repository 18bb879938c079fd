from typing import List, Mapping, Tuple


def _rank_key(item: Tuple[str, int]):
    word, count = item
    return (-count, -len(word), word)


def rank(counts: Mapping[str, int], limit: int) -> List[Tuple[str, int]]:
    """Return the `limit` most popular (word, count) pairs.

    Ordered by count descending, then longer words first, then alphabetically,
    so equal inputs always rank the same way.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return sorted(counts.items(), key=_rank_key)[:limit]
