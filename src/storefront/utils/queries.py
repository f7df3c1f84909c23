"""Query helpers shared by repositories and read models."""

PAGE_SIZE = 100


def fetch_all(queryset, page_size=PAGE_SIZE):
    """Return every record matched by ``queryset``, page by page.

    DAO querysets are limited by default, so aggregates that must see the
    whole table walk the result pages until ``total`` is exhausted.
    """
    records = []
    offset = 0
    while True:
        page = queryset.offset(offset).limit(page_size).all()
        records.extend(page.items)
        offset += page_size
        if offset >= page.total or not page.items:
            return records
