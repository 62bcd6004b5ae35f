"""
Deferred values for menu configuration.

Menu entries are declared once at import time but many of their fields
(labels, URLs, badges) can only be computed while a request is being served.
``Deferred`` stores either a plain value or a callable and resolves it on
demand::

    url = Deferred(lambda: reverse("users_list"))
    url.resolve()  # -> "/users/"

Lazy translation strings and ``reverse_lazy()`` proxies are not callable, so
they are returned untouched and evaluated when converted to ``str``.
"""


class Deferred:
    """A stored value or callable, resolved with ``resolve()``."""

    __slots__ = ("source",)

    def __init__(self, source=None):
        self.source = source

    def __bool__(self):
        return self.source is not None

    def __repr__(self):
        return f"Deferred({self.source!r})"

    def resolve(self, *args, **kwargs):
        """Return the value, calling the source with *args* if it is callable."""
        if callable(self.source):
            return self.source(*args, **kwargs)
        return self.source
