"""
Menu definition for the panel.

This is the single source of truth for the sidebar and top bar. Entries are
either a ``MenuItem`` (a link) or a ``MenuGroup`` (a dropdown of nested
entries); ``settings.MENU_CONFIG`` points here.
"""

from django.urls import reverse, reverse_lazy

from menu_manager import MenuGroup, MenuItem, menu_icon


@menu_icon("inbox")
class InboxFiller:
    """Supplies the inbox link, its active state and the unread counter."""

    unread = 0

    def get_url(self):
        return reverse("inbox")

    def is_active(self, request):
        return request.path.startswith(self.get_url())

    def get_badge(self):
        return self.unread


MENU = (
    MenuItem("dashboard", reverse_lazy("home"), icon="home"),
    MenuItem("users", reverse_lazy("users_list"), icon="users").requires_permission("auth.view_user"),
    MenuGroup(
        "organization",
        (
            MenuItem("departments", reverse_lazy("departments_list")),
            MenuItem("companies", reverse_lazy("companies_list")),
            MenuItem("locations", reverse_lazy("locations_list")),
        ),
        icon="building",
    ),
    MenuGroup(
        "procurement",
        (
            MenuItem("requisitions", reverse_lazy("requisitions_list")),
            MenuItem("invoices", reverse_lazy("invoices_list")),
            MenuItem("vendors", reverse_lazy("vendors_list")),
        ),
        icon="cart",
    ),
    MenuItem("inbox", InboxFiller()),
    MenuItem("documentation", "https://docs.djangoproject.com/", icon="book", blank=True),
)
