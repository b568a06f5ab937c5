from typing import List


def split_topics(text: str) -> List[str]:
    """
    One topic per line; surrounding whitespace and blank lines are dropped.
    """
    return [line.strip() for line in (text or "").strip().split("\n") if line.strip()]
