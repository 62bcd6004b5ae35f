"""Presentation components used by menu templates."""

import copy

from django.forms.utils import flatatt
from django.template.loader import render_to_string

DEFAULT_BUTTON_TEMPLATE = "menu_manager/action_button.html"


class ActionButton:
    """
    A link-style button rendered from a template.

    Args:
        label: Text shown on the button (string or lazy string)
        url: Target URL
        attributes: Extra HTML attributes for the link element

    ``custom_attributes()``, ``set_url()`` and ``custom_view()`` update the
    button in place and return it so calls can be chained.
    """

    def __init__(self, label, url="", attributes=None):
        self.label = label
        self.url = url
        self.attributes = dict(attributes or {})
        self.view = DEFAULT_BUTTON_TEMPLATE
        self.view_data = {}

    def __repr__(self):
        return f"ActionButton({self.label!r}, url={self.url!r})"

    def __copy__(self):
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone.attributes = dict(self.attributes)
        clone.view_data = dict(self.view_data)
        return clone

    def clone(self):
        return copy.copy(self)

    def set_url(self, url):
        self.url = url
        return self

    def custom_attributes(self, attributes):
        self.attributes.update(attributes)
        return self

    def custom_view(self, view, data=None):
        self.view = view
        self.view_data = dict(data or {})
        return self

    def get_context(self):
        context = {
            "label": self.label,
            "url": self.url,
        }
        context.update(self.view_data)
        context["attributes"] = flatatt(self.attributes)
        context["button"] = self
        return context

    def render(self):
        return render_to_string(self.view, self.get_context())

    def __html__(self):
        return self.render()

    def __str__(self):
        return self.render()
