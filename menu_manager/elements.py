"""
Menu tree: items, groups and the collection type that holds them.

A menu is declared once as a tuple of ``MenuItem`` / ``MenuGroup`` entries
(see ``core/menu.py``) and shared by every request. Per-request work never
mutates that configuration:

  - ``MenuElements.only_visible(request)`` drops entries the request may not
    see, cloning groups whose children were filtered.
  - ``MenuElements.top_mode()`` clones the whole tree and marks it for the
    compact top-bar layout.
  - ``MenuElement.render(request)`` prepares and renders a clone.
"""

import copy
import logging
from collections.abc import Iterator
from dataclasses import dataclass

from django.forms.utils import flatatt
from django.template.loader import render_to_string

from .components import ActionButton
from .conf import home_url
from .deferred import Deferred
from .fillers import MenuFiller, has_badge, resolve_icon
from .matching import parse_url, request_host, url_is

logger = logging.getLogger(__name__)

COMPACT_ICON_SIZE = 6


@dataclass(frozen=True)
class Icon:
    """Icon reference handed to templates."""
    name: str
    size: int = None
    custom: bool = False
    path: str = None


# ---------------------------------------------------------------------------
# Base element
# ---------------------------------------------------------------------------


class MenuElement:
    """
    Common behaviour of every menu entry.

    Subclasses set ``template_name`` and implement ``is_active()`` and
    ``view_data()``.
    """

    template_name = None

    def __init__(self):
        self._label = Deferred("")
        self._icon = ""
        self._custom_icon = False
        self._icon_path = None
        self._top_mode = False
        self._can_see = None
        self._attributes = {}

    def __repr__(self):
        return f"{self.__class__.__name__}({self._label.source!r})"

    def clone(self):
        element = copy.copy(self)
        element._attributes = dict(self._attributes)
        return element

    # -- label / icon --

    def set_label(self, label):
        self._label = Deferred(label)
        return self

    def get_label(self):
        label = self._label.resolve()
        return "" if label is None else label

    def icon(self, name, custom=False, path=None):
        self._icon = name or ""
        self._custom_icon = custom
        self._icon_path = path
        return self

    def get_icon_value(self):
        return self._icon

    def is_custom_icon(self):
        return self._custom_icon

    def get_icon_path(self):
        return self._icon_path

    def get_icon(self, size=None):
        if not self._icon:
            return None
        return Icon(name=self._icon, size=size, custom=self._custom_icon, path=self._icon_path)

    # -- top mode --

    def top_mode(self, condition=None):
        """
        Mark the element for the compact top-bar layout.

        ``None`` turns top mode on. A callable is evaluated immediately with
        the element; any other value is used as a boolean.
        """
        if condition is None:
            self._top_mode = True
        elif callable(condition):
            self._top_mode = bool(condition(self))
        else:
            self._top_mode = bool(condition)
        return self

    def is_top_mode(self):
        return self._top_mode

    # -- visibility --

    def can_see(self, callback):
        """Show the element only when ``callback(request)`` is true."""
        self._can_see = callback
        return self

    def requires_permission(self, *perms):
        """Show the element only to users holding all of *perms*."""

        def check(request):
            user = getattr(request, "user", None)
            return user is not None and user.has_perms(perms)

        return self.can_see(check)

    def is_see(self, request):
        if self._can_see is None:
            return True
        return bool(self._can_see(request))

    # -- attributes --

    def custom_attributes(self, attributes):
        self._attributes.update(attributes)
        return self

    def get_attributes(self):
        return dict(self._attributes)

    # -- rendering --

    def is_active(self, request):
        raise NotImplementedError

    def view_data(self, request):
        return {}

    def prepare_before_render(self, request):
        """Hook run on the clone that is about to be rendered."""

    def get_context(self, request):
        context = {
            "request": request,
            "element": self,
            "label": self.get_label(),
            "icon": self.get_icon(),
            "is_active": self.is_active(request),
            "top_mode": self.is_top_mode(),
            "attributes": flatatt(self._attributes),
        }
        context.update(self.view_data(request))
        return context

    def render(self, request):
        element = self.clone()
        element.prepare_before_render(request)
        return render_to_string(element.template_name, element.get_context(request))


# ---------------------------------------------------------------------------
# Collection
# ---------------------------------------------------------------------------


class MenuElements(tuple):
    """Ordered, immutable collection of menu elements."""

    def __new__(cls, elements=()):
        return super().__new__(cls, elements)

    def __repr__(self):
        return f"MenuElements({list(self)!r})"

    @classmethod
    def make(cls, elements=()):
        return cls(elements)

    def top_mode(self, condition=None):
        """Return a cloned tree with every element marked for top mode."""
        transformed = []
        for element in self:
            element = element.clone()
            if isinstance(element, MenuGroup):
                element.set_items(element.items().top_mode(condition))
            transformed.append(element.top_mode(condition))
        return self.__class__(transformed)

    def only_visible(self, request):
        """Return the elements *request* may see, filtering groups recursively."""
        visible = []
        for element in self:
            if isinstance(element, MenuGroup):
                element = element.clone().set_items(element.items().only_visible(request))
            if element.is_see(request):
                visible.append(element)
            else:
                logger.debug("Hiding menu element %r", element)
        return self.__class__(visible)


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


class MenuGroup(MenuElement):
    """A labelled container of menu elements (rendered as a dropdown)."""

    template_name = "menu_manager/menu/group.html"

    def __init__(self, label, items=(), icon=None):
        super().__init__()
        self.set_label(label)
        self.set_items(items)
        if icon:
            self.icon(icon)

    def set_items(self, items):
        # One-shot iterators would be exhausted by the first items() call.
        if isinstance(items, Iterator):
            items = tuple(items)
        self._items = items
        return self

    def items(self):
        return MenuElements(self._items)

    def is_active(self, request):
        for item in self.items():
            if item.is_active(request):
                return True
        return False

    def view_data(self, request):
        return {"items": self.items()}


# ---------------------------------------------------------------------------
# Item
# ---------------------------------------------------------------------------


class MenuItem(MenuElement):
    """
    A single menu link.

    Args:
        label: Display label (string, lazy string or callable)
        filler: A URL string, a lazy URL (``reverse_lazy``), a zero-argument
                callable returning a URL, or a ``MenuFiller`` object
        icon: Icon name
        blank: Open the link in a new browsing context (bool or callable
               receiving the item)
    """

    template_name = "menu_manager/menu/item.html"
    link_template_name = "menu_manager/menu/item_link.html"

    def __init__(self, label, filler, icon=None, blank=False):
        super().__init__()
        self._filler = filler
        self._url = Deferred()
        self._badge = Deferred()
        self._blank = False
        self._when_active = Deferred()

        self.set_label(label)
        self._action_button = ActionButton(label)

        if icon:
            self.icon(icon)

        if isinstance(filler, MenuFiller):
            self._resolve_filler(filler)
        else:
            self.set_url(filler)

        self.blank(blank)

    def clone(self):
        item = super().clone()
        item._action_button = self._action_button.clone()
        return item

    def _resolve_filler(self, filler):
        self.set_url(filler.get_url)

        if has_badge(filler):
            self.badge(filler.get_badge)

        icon = resolve_icon(filler)
        if icon is not None and self.get_icon_value() == "":
            self.icon(icon, self.is_custom_icon(), self.get_icon_path())

    def get_filler(self):
        return self._filler

    def change_button(self, callback):
        """Replace the action button with ``callback(button)``."""
        self._action_button = callback(self._action_button)
        return self

    def get_action_button(self):
        return self._action_button

    # -- badge --

    def badge(self, callback):
        self._badge = Deferred(callback)
        return self

    def has_badge(self):
        return bool(self._badge)

    def get_badge(self):
        return self._badge.resolve()

    # -- url --

    def set_url(self, url, blank=False):
        self._url = Deferred(url)
        self.blank(blank)
        return self

    def get_url(self):
        url = self._url.resolve()
        return "" if url is None else str(url)

    def blank(self, condition=True):
        value = condition(self) if callable(condition) else condition
        self._blank = True if value is None else bool(value)
        return self

    def is_blank(self):
        return self._blank

    # -- active state --

    def when_active(self, callback):
        """
        Override the active check.

        ``callback(path, host, item, request)`` receives the parsed target
        URL and returns the final result.
        An item without a URL matches every page by default; use this to
        change that.
        """
        self._when_active = Deferred(callback)
        return self

    def is_active(self, request):
        filler = self.get_filler()
        if isinstance(filler, MenuFiller):
            return bool(filler.is_active(request))

        url = self.get_url()
        path, host = parse_url(url)

        if self._when_active:
            return bool(self._when_active.resolve(path, host, self, request))

        return self._matches_request(request, url, path, host)

    def _matches_request(self, request, url, path, host):
        current_host = request_host(request)
        # Relative URLs point at the current host.
        if path == "/" and (host or current_host) == current_host:
            return request.path == "/"

        if url == home_url():
            return url_is(request, url)

        return url_is(request, f"*{url}*")

    # -- rendering --

    def prepare_before_render(self, request):
        super().prepare_before_render(request)

        if self.is_blank():
            self._action_button.custom_attributes({"target": "_blank"})

        if not self.is_top_mode():
            self._action_button.custom_attributes({
                "x-data": "navTooltip",
                "@mouseenter": "toggleTooltip",
            })

    def view_data(self, request):
        url = self.get_url()
        data = {"url": url}

        if self.has_badge():
            badge = self.get_badge()
            if badge:
                data["badge"] = badge

        data["action_button"] = self._action_button.clone().set_url(url).custom_view(
            self.link_template_name,
            {
                "url": url,
                "label": self.get_label(),
                "icon": self.get_icon(COMPACT_ICON_SIZE),
                "top": self.is_top_mode(),
                "badge": data.get("badge", ""),
            },
        )
        return data
