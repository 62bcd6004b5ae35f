"""
Menu configuration loading and per-request menu building.

The menu is declared in the module named by ``settings.MENU_CONFIG``. The
target may be a ``MenuManager``, a plain iterable of menu elements, or a
callable returning either::

    # core/menu.py
    MENU = (
        MenuItem("dashboard", reverse_lazy("home"), icon="home"),
        MenuGroup("organization", (...)),
    )

``build_menu(request)`` returns the tree a given request should see.
"""

import logging

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from . import conf
from .elements import MenuElement, MenuElements

logger = logging.getLogger(__name__)


class MenuManager:
    """Holds the static menu configuration."""

    def __init__(self, elements=()):
        self._elements = list(elements)
        self._top_mode = False
        self._top_mode_condition = None

    def __len__(self):
        return len(self._elements)

    def add(self, *elements):
        self._elements.extend(elements)
        return self

    def prepend(self, *elements):
        self._elements[:0] = elements
        return self

    def top_mode(self, condition=None):
        """Render the menu in top mode (see ``MenuElement.top_mode``)."""
        self._top_mode = True
        self._top_mode_condition = condition
        return self

    def is_top_mode(self):
        return self._top_mode

    def elements(self):
        return MenuElements(self._elements)

    def all(self, request):
        """Return the elements *request* may see, in top mode if enabled."""
        elements = self.elements().only_visible(request)
        if self._top_mode:
            elements = elements.top_mode(self._top_mode_condition)
        return elements


def _as_manager(obj, path):
    if callable(obj) and not isinstance(obj, MenuManager):
        obj = obj()
    if isinstance(obj, MenuManager):
        return obj
    try:
        elements = list(obj)
    except TypeError as exc:
        raise ImproperlyConfigured(
            f"MENU_CONFIG {path!r} must be a MenuManager or an iterable of menu elements."
        ) from exc
    for element in elements:
        if not isinstance(element, MenuElement):
            raise ImproperlyConfigured(
                f"MENU_CONFIG {path!r} contains {element!r}, which is not a menu element."
            )
    return MenuManager(elements)


def load_menu():
    """Import and return the configured ``MenuManager``."""
    path = conf.menu_config_path()
    try:
        obj = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"MENU_CONFIG {path!r} could not be imported: {exc}") from exc

    manager = _as_manager(obj, path)
    logger.debug("Loaded %d menu elements from %s", len(manager), path)
    return manager


def build_menu(request):
    """Return the menu tree for *request*."""
    manager = load_menu()
    if conf.top_mode_enabled() and not manager.is_top_mode():
        manager = MenuManager(manager.elements()).top_mode()
    return manager.all(request)
