import logging
import re
import sys

logger = logging.getLogger(__name__)

USAGE = 'Usage: please provide a list of at least two integers to sort in the format "1, 2, 3, 4, 5"'

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1
MAX_DIGITS = len(str(INT_MAX))

DELIMITER = re.compile(r",\s*")
INTEGER = re.compile(r"[+-]?[0-9]+")


class UsageError(ValueError):
    pass


class ParseError(UsageError):
    pass


def bubble_sort(xs):
    """Sort xs in place and return it."""
    end = len(xs) - 1
    passes = 0
    swapped = True
    while swapped and end > 0:
        swapped = False
        for i in range(end):
            if xs[i] > xs[i + 1]:
                xs[i], xs[i + 1] = xs[i + 1], xs[i]
                swapped = True
        # the largest remaining value is now at xs[end]
        end -= 1
        passes += 1
    logger.debug("sorted %d values in %d passes", len(xs), passes)
    return xs


def test_bubble_sort():
    assert bubble_sort([5, 4, 3, 2, 1]) == [1, 2, 3, 4, 5]


def input_list(list_str):
    tokens = [x.strip() for x in DELIMITER.split(list_str)]
    xs = []
    for token in tokens:
        if not token:
            continue
        if not INTEGER.fullmatch(token):
            raise ParseError(f"not an integer: {token!r}")
        # int() refuses very long digit strings, so bound the length first
        if len(token.lstrip("+-").lstrip("0")) > MAX_DIGITS:
            raise ParseError(f"out of range: {token[:24]}...")
        x = int(token, 10)
        if not INT_MIN <= x <= INT_MAX:
            raise ParseError(f"out of range: {token}")
        xs.append(x)
    logger.debug("parsed %d of %d tokens", len(xs), len(tokens))
    if len(xs) < 2:
        raise ParseError(f"need at least two integers, got {len(xs)}")
    return xs


def test_input_list():
    assert input_list('1, 2, 3, 4, 5') == [1, 2, 3, 4, 5]


def format_list(xs):
    """Join xs with ", ". Callers must pass a non-empty list."""
    if not xs:
        raise ValueError("nothing to format")
    return ", ".join(str(x) for x in xs)


def exit_with_error():
    print(USAGE, file=sys.stderr)
    sys.exit(1)


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    try:
        if len(args) != 1:
            raise UsageError(f"expected one argument, got {len(args)}")
        xs = input_list(args[0])
    except UsageError as e:
        logger.debug("usage error: %s", e)
        exit_with_error()
    print(format_list(bubble_sort(xs)))


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    main(sys.argv[1:])
