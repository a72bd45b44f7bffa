import math
from typing import Dict
from urllib.parse import urlencode


def generate_uri(base_url: str, page: int, size: int) -> str:
    return f"{base_url}?{urlencode({'page': page, 'size': size})}"


def generate_pagination_headers(total: int, page: int, size: int, base_url: str) -> Dict[str, str]:
    """
    Build the X-Total-Count and RFC 5988 Link headers for a page of results.

    Pages are zero-based. "next" and "prev" only appear when such a page
    exists, "last" and "first" are always present.
    """
    total_pages = math.ceil(total / size) if size > 0 else 0

    links = []
    if page + 1 < total_pages:
        links.append(f'<{generate_uri(base_url, page + 1, size)}>; rel="next"')
    if page > 0:
        links.append(f'<{generate_uri(base_url, page - 1, size)}>; rel="prev"')

    last_page = total_pages - 1 if total_pages > 0 else 0
    links.append(f'<{generate_uri(base_url, last_page, size)}>; rel="last"')
    links.append(f'<{generate_uri(base_url, 0, size)}>; rel="first"')

    return {
        "X-Total-Count": str(total),
        "Link": ",".join(links),
    }
