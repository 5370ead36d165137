"""Word count helpers: merging partial counts and picking the most popular words."""
from typing import Dict, Mapping


def merge_word_counts(dst: Dict[str, int], src: Mapping[str, int]) -> Dict[str, int]:
    """Add every count in `src` into `dst` in place and return `dst`.

    Commutative and associative, so the merge order of concurrently finished
    subtrees never changes the total.
    """
    for word, count in src.items():
        dst[word] = dst.get(word, 0) + count
    return dst


def _popularity_key(item):
    word, count = item
    return (-count, -len(word), word)


def top_words(word_counts: Mapping[str, int], popular_word_count: int) -> Dict[str, int]:
    """Return at most `popular_word_count` entries, most popular first.

    Ordered by count (descending), then word length (descending), then the
    word itself (ascending). The returned dict preserves that order.
    """
    if popular_word_count <= 0 or not word_counts:
        return {}
    ranked = sorted(word_counts.items(), key=_popularity_key)
    return dict(ranked[:popular_word_count])
