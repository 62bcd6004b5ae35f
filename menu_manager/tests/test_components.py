"""Tests for ActionButton and element-level HTML attributes."""

from django.test import RequestFactory, SimpleTestCase

from menu_manager.components import ActionButton
from menu_manager.elements import MenuElements, MenuGroup, MenuItem


class ActionButtonTests(SimpleTestCase):
    def test_default_view(self):
        html = ActionButton("Export", "/export/", {"data-kind": "csv"}).render()
        self.assertIn('href="/export/"', html)
        self.assertIn('data-kind="csv"', html)
        self.assertIn("Export", html)

    def test_chaining_updates_in_place(self):
        button = ActionButton("Export")
        result = button.set_url("/export/").custom_attributes({"target": "_blank"})
        self.assertIs(result, button)
        self.assertEqual(button.url, "/export/")
        self.assertEqual(button.attributes, {"target": "_blank"})

    def test_clone_copies_attributes(self):
        button = ActionButton("Export", attributes={"a": "1"})
        clone = button.clone().custom_attributes({"b": "2"})
        self.assertEqual(button.attributes, {"a": "1"})
        self.assertEqual(clone.attributes, {"a": "1", "b": "2"})

    def test_custom_view_data_overrides_label(self):
        button = ActionButton("Export").custom_view(
            "menu_manager/action_button.html", {"label": "Download"}
        )
        self.assertIn("Download", str(button))


class ElementAttributesTests(SimpleTestCase):
    def test_group_attributes_are_rendered(self):
        group = MenuGroup("reports", (MenuItem("daily", "/daily/"),))
        group.custom_attributes({"data-section": "reports"})
        html = group.render(RequestFactory().get("/"))
        self.assertIn('data-section="reports"', html)
        self.assertEqual(group.get_attributes(), {"data-section": "reports"})

    def test_cloned_elements_do_not_share_attributes(self):
        item = MenuItem("daily", "/daily/")
        clone = MenuElements.make((item,)).top_mode()[0]
        clone.custom_attributes({"data-top": "1"})
        self.assertEqual(item.get_attributes(), {})
