from typing import Iterable, List, Tuple
from urllib.parse import quote, urlencode


def encode_query(params: Iterable[Tuple[str, str]]) -> str:
    """Encode query parameters sorted by key, keeping commas literal."""
    return urlencode(sorted(params, key=lambda item: item[0]), safe=",")


def path_segment(value) -> str:
    return quote(str(value), safe="")


def pagination(start_at: int, max_results: int) -> List[Tuple[str, str]]:
    if start_at < 0:
        raise ValueError("start_at must be a non-negative integer")
    if max_results <= 0:
        raise ValueError("max_results must be a positive integer")

    return [("startAt", str(start_at)), ("maxResults", str(max_results))]
