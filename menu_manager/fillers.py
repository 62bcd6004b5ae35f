"""
Menu fillers: objects that supply a menu item's URL and active state.

A filler decouples an item from static configuration. Any object providing
``get_url()`` and ``is_active(request)`` qualifies; ``get_badge()`` is
optional. An icon can be attached to the filler class with ``@menu_icon``::

    @menu_icon("inbox")
    class InboxFiller:
        def get_url(self):
            return reverse("inbox")

        def is_active(self, request):
            return request.path.startswith("/inbox/")

        def get_badge(self):
            return Message.objects.unread().count()

    MenuItem("inbox", InboxFiller())
"""

from typing import Protocol, runtime_checkable

ICON_ATTRIBUTE = "_menu_icon"


@runtime_checkable
class MenuFiller(Protocol):
    def get_url(self) -> str: ...

    def is_active(self, request) -> bool: ...


def menu_icon(name: str):
    """Class decorator attaching the icon *name* to a filler class."""

    def decorator(cls):
        setattr(cls, ICON_ATTRIBUTE, name)
        return cls

    return decorator


def resolve_icon(filler) -> str | None:
    """Return the icon declared on *filler* with ``@menu_icon``, if any."""
    return getattr(filler, ICON_ATTRIBUTE, None)


def has_badge(filler) -> bool:
    return callable(getattr(filler, "get_badge", None))
