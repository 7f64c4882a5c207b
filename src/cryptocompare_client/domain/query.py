# src/cryptocompare_client/domain/query.py
"""Query string construction for the ``data/price`` endpoint.

Segments are emitted in a fixed order (fsym, tsyms, e, extraParams, sign,
tryConversion) so the same request always yields the same URL.
"""

from typing import List

from cryptocompare_client.domain.types import PriceRequest


def _format_bool(flag: bool) -> str:
    return "true" if flag else "false"


def query_segments(request: PriceRequest) -> List[str]:
    """Ordered ``key=value`` segments for ``request``. Values are not escaped."""
    segments: List[str] = []

    if request.fsym:
        segments.append(f"fsym={request.fsym}")

    if request.tsyms:
        segments.append(f"tsyms={','.join(request.tsyms)}")

    if request.e:
        segments.append(f"e={request.e}")

    if request.extra_params:
        segments.append(f"extraParams={request.extra_params}")

    segments.append(f"sign={_format_bool(request.sign)}")
    segments.append(f"tryConversion={_format_bool(request.try_conversion)}")
    return segments


def format_query_string(base_path: str, request: PriceRequest) -> str:
    """Append the request's query string to ``base_path``."""
    segments = query_segments(request)
    if segments:
        return f"{base_path}?{'&'.join(segments)}"
    return base_path
