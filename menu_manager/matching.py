"""
URL helpers used to decide whether a menu item points at the current page.

Patterns passed to ``url_is`` use ``*`` as the only wildcard; everything else
is matched literally and the whole candidate must match:

  - ``"/users/"`` matches only the exact path ``/users/``
  - ``"*/users/*"`` matches ``/users/``, ``/users/5/`` and
    ``http://testserver/users/?page=2``

Relative patterns are compared with the request's full path (including the
query string); absolute ones with the absolute URI.
"""

import re
from urllib.parse import urlsplit


def parse_url(url):
    """
    Split *url* into a ``(path, host)`` pair.

    A URL without a path (``"http://example.com"``) has path ``"/"``.
    An empty URL has an empty path. Malformed URLs yield ``("", "")``.
    """
    try:
        parts = urlsplit(url)
        host = parts.hostname or ""
    except ValueError:
        return "", ""
    path = parts.path or ("/" if url else "")
    return path, host


def request_host(request):
    """Return the current request's host name without the port."""
    return urlsplit("//" + request.get_host()).hostname or ""


def _wildcard_regex(pattern):
    return re.compile(re.escape(pattern).replace(r"\*", ".*"), re.DOTALL)


def url_is(request, *patterns):
    """Return True when the current URL matches any of *patterns*."""
    absolute = request.build_absolute_uri()
    relative = request.get_full_path()

    for pattern in patterns:
        if pattern in (absolute, relative):
            return True
        regex = _wildcard_regex(pattern)
        if regex.fullmatch(absolute) or regex.fullmatch(relative):
            return True
    return False
