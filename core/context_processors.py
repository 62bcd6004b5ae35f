"""
Context processors for the panel.

Exposes the menu configured in ``settings.MENU_CONFIG`` to templates, already
narrowed to what the current request may see.
"""

from menu_manager.manager import build_menu


def menu(request):
    """
    Add the menu to the template context.

    Returns a dictionary with a ``menu`` key containing a ``MenuElements``
    collection of items and groups.
    """
    return {
        "menu": build_menu(request),
    }
