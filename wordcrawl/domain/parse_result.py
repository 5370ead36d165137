from typing import Dict, List, NamedTuple


class ParseResult(NamedTuple):
    """Outbound links and word counts of a single parsed page."""
    links: List[str]
    word_counts: Dict[str, int]
