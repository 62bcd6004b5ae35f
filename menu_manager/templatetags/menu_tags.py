from django import template
from django.utils.safestring import mark_safe

from menu_manager.manager import build_menu

register = template.Library()


@register.simple_tag(takes_context=True)
def render_menu(context, menu=None, top=False):
    """
    Render a menu collection.

    Usage:
      {% render_menu %}                  -- the configured menu for this request
      {% render_menu menu %}             -- an already built collection
      {% render_menu menu top=True %}    -- the same collection in top mode

    Renders nothing when the context has no request.
    """
    request = context.get("request")
    if not request:
        return ""

    elements = build_menu(request) if menu is None else menu
    if top:
        elements = elements.top_mode()

    return mark_safe("".join(element.render(request) for element in elements))


@register.simple_tag(takes_context=True)
def render_menu_element(context, element):
    """Render a single menu element (used by the group template for children)."""
    request = context.get("request")
    if not request:
        return ""
    return element.render(request)
