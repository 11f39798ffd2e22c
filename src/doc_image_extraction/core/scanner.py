"""Collect the image objects painted on a PDF page from its operation list."""

from .constants import IMAGE_PAINT_OPS


def scan_page_operations(operations):
    """
    Collect the distinct image keys painted by an operation list.

    Parameters
    ----------
    operations : iterable of (int, sequence)
        Decoded ``(operator_code, args)`` pairs of one page, in paint order.

    Returns
    -------
    list
        Image keys in first-occurrence order. A key painted several times
        (tiled backgrounds, repeated logos) appears once.
    """
    keys = []
    seen = set()
    for operator, args in operations:
        if operator not in IMAGE_PAINT_OPS or not args:
            continue
        key = args[0]
        if key in seen:
            continue
        seen.add(key)
        keys.append(key)
    return keys
