"""
Settings access for the menu manager.

Every setting has a default so the app works without any configuration:

``MENU_CONFIG``
    Dotted path to the menu definition (see ``manager.load_menu``).
``MENU_HOME_URL_NAME``
    URL name of the panel's home endpoint. An item pointing at the home URL
    is only highlighted on that exact page.
``MENU_TOP_MODE``
    Render the menu in compact "top bar" mode.
"""

import logging

from django.conf import settings
from django.urls import NoReverseMatch, reverse

logger = logging.getLogger(__name__)

DEFAULT_MENU_CONFIG = "core.menu.MENU"
DEFAULT_HOME_URL_NAME = "home"


def menu_config_path() -> str:
    return getattr(settings, "MENU_CONFIG", DEFAULT_MENU_CONFIG)


def home_url_name() -> str | None:
    return getattr(settings, "MENU_HOME_URL_NAME", DEFAULT_HOME_URL_NAME)


def top_mode_enabled() -> bool:
    return bool(getattr(settings, "MENU_TOP_MODE", False))


def home_url() -> str | None:
    """Return the reversed home URL, or ``None`` if it cannot be resolved."""
    name = home_url_name()
    if not name:
        return None
    try:
        return reverse(name)
    except NoReverseMatch:
        logger.warning("MENU_HOME_URL_NAME %r could not be reversed; ignoring it.", name)
        return None
