from andyet.utils.pagination_utils import generate_pagination_headers, generate_uri


def test_generate_uri():
    assert generate_uri("/api/newss", 2, 20) == "/api/newss?page=2&size=20"


def test_middle_page_has_all_links():
    headers = generate_pagination_headers(total=50, page=1, size=20, base_url="/api/newss")

    assert headers["X-Total-Count"] == "50"
    assert headers["Link"] == ",".join([
        '</api/newss?page=2&size=20>; rel="next"',
        '</api/newss?page=0&size=20>; rel="prev"',
        '</api/newss?page=2&size=20>; rel="last"',
        '</api/newss?page=0&size=20>; rel="first"',
    ])


def test_empty_collection():
    headers = generate_pagination_headers(total=0, page=0, size=20, base_url="/api/newss")

    assert headers["X-Total-Count"] == "0"
    assert headers["Link"] == (
        '</api/newss?page=0&size=20>; rel="last",'
        '</api/newss?page=0&size=20>; rel="first"'
    )


def test_exact_multiple_of_page_size():
    headers = generate_pagination_headers(total=40, page=1, size=20, base_url="/api/newss")

    assert 'rel="next"' not in headers["Link"]
    assert '</api/newss?page=1&size=20>; rel="last"' in headers["Link"]
