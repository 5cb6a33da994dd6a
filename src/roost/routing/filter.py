"""Turn a raw path segment into a safe controller/action identifier."""

import re
from urllib.parse import unquote

# ASCII only: anything that isn't a letter, digit, whitespace or dash goes.
_UNSAFE_RE = re.compile(r"[^a-z0-9\s-]", re.IGNORECASE | re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+", re.ASCII)


def filter_segment(value: str) -> str:
    """Reduce *value* to ``[a-z0-9-]``.

    URL-decodes, trims, strips special characters, turns each run of
    whitespace into a single dash, and lowercases::

        filter_segment("My%20Action!")  -> "my-action"
        filter_segment("  blog  posts ") -> "blog-posts"

    Dashes survive so the result is stable under a second pass.
    """
    value = unquote(value).strip()
    value = _UNSAFE_RE.sub("", value)
    value = _WHITESPACE_RE.sub("-", value)
    return value.lower()
