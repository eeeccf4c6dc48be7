"""Value-count histograms over result sets"""
from typing import Any, Dict, Iterable, List


def build_value_histogram(documents: Iterable[Dict], field: str) -> List[Dict[str, Any]]:
    """
    Count occurrences of each distinct value of `field`.

    Pairs come back in order of first appearance. Documents without the
    field are skipped. Numbers compare by value (120 and 120.0 share a
    bucket, reported as the first one seen); booleans never merge with 0/1.
    """
    order = []
    counts = {}

    for doc in documents:
        if field not in doc:
            continue
        value = doc[field]
        key = (isinstance(value, bool), value)
        if key not in counts:
            counts[key] = 0
            order.append((key, value))
        counts[key] += 1

    return [{"value": value, "count": counts[key]} for key, value in order]
