"""
Tests for menu configuration loading and per-request menu building.

Covers:
- MenuManager: add/prepend ordering, visibility filtering, top mode
- load_menu(): tuples, managers and callables named by MENU_CONFIG
- load_menu(): misconfiguration raises ImproperlyConfigured
- build_menu(): MENU_TOP_MODE
- conf.home_url(): unreversible names
"""

from django.core.exceptions import ImproperlyConfigured
from django.test import RequestFactory, SimpleTestCase, override_settings

from menu_manager import conf
from menu_manager.elements import MenuElements, MenuGroup, MenuItem
from menu_manager.manager import MenuManager, build_menu, load_menu

MODULE = "menu_manager.tests.test_manager"

TUPLE_MENU = (
    MenuItem("a", "/a/"),
    MenuItem("hidden", "/hidden/").can_see(lambda request: False),
    MenuGroup("group", (MenuItem("b", "/b/"),)),
)

MANAGER_MENU = MenuManager([MenuItem("managed", "/managed/")])

NOT_ITERABLE = 42

NOT_ELEMENTS = ("a", "b")


def callable_menu():
    return [MenuItem("from-callable", "/c/")]


def _labels(elements):
    return [element.get_label() for element in elements]


# ======================================================================
# MenuManager
# ======================================================================


class MenuManagerTests(SimpleTestCase):
    def setUp(self):
        self.request = RequestFactory().get("/")

    def test_add_and_prepend(self):
        manager = MenuManager([MenuItem("b", "/b/")])
        manager.add(MenuItem("c", "/c/"), MenuItem("d", "/d/")).prepend(MenuItem("a", "/a/"))
        self.assertEqual(_labels(manager.elements()), ["a", "b", "c", "d"])
        self.assertEqual(len(manager), 4)

    def test_elements_is_a_collection(self):
        self.assertIsInstance(MenuManager().elements(), MenuElements)

    def test_all_filters_hidden_elements(self):
        manager = MenuManager(TUPLE_MENU)
        self.assertEqual(_labels(manager.all(self.request)), ["a", "group"])

    def test_all_in_top_mode(self):
        manager = MenuManager(TUPLE_MENU).top_mode()
        self.assertTrue(manager.is_top_mode())
        result = manager.all(self.request)
        self.assertTrue(all(element.is_top_mode() for element in result))
        self.assertTrue(result[1].items()[0].is_top_mode())
        self.assertFalse(TUPLE_MENU[0].is_top_mode())

    def test_top_mode_condition(self):
        manager = MenuManager(TUPLE_MENU).top_mode(lambda element: element.get_label() == "a")
        result = manager.all(self.request)
        self.assertEqual([e.is_top_mode() for e in result], [True, False])


# ======================================================================
# load_menu / build_menu
# ======================================================================


class LoadMenuTests(SimpleTestCase):
    @override_settings(MENU_CONFIG=f"{MODULE}.TUPLE_MENU")
    def test_loads_tuple(self):
        self.assertEqual(_labels(load_menu().elements()), ["a", "hidden", "group"])

    @override_settings(MENU_CONFIG=f"{MODULE}.MANAGER_MENU")
    def test_loads_manager(self):
        self.assertIs(load_menu(), MANAGER_MENU)

    @override_settings(MENU_CONFIG=f"{MODULE}.callable_menu")
    def test_loads_callable(self):
        self.assertEqual(_labels(load_menu().elements()), ["from-callable"])

    @override_settings(MENU_CONFIG=f"{MODULE}.DOES_NOT_EXIST")
    def test_missing_attribute(self):
        with self.assertRaises(ImproperlyConfigured):
            load_menu()

    @override_settings(MENU_CONFIG="no_such_module.MENU")
    def test_missing_module(self):
        with self.assertRaises(ImproperlyConfigured):
            load_menu()

    @override_settings(MENU_CONFIG=f"{MODULE}.NOT_ITERABLE")
    def test_not_iterable(self):
        with self.assertRaises(ImproperlyConfigured) as ctx:
            load_menu()
        self.assertIsInstance(ctx.exception.__cause__, TypeError)

    @override_settings(MENU_CONFIG=f"{MODULE}.NOT_ELEMENTS")
    def test_not_menu_elements(self):
        with self.assertRaises(ImproperlyConfigured):
            load_menu()

    def test_default_config(self):
        labels = _labels(load_menu().elements())
        self.assertEqual(labels[:2], ["dashboard", "users"])


class BuildMenuTests(SimpleTestCase):
    def setUp(self):
        self.request = RequestFactory().get("/")

    @override_settings(MENU_CONFIG=f"{MODULE}.TUPLE_MENU", MENU_TOP_MODE=False)
    def test_visible_elements(self):
        result = build_menu(self.request)
        self.assertEqual(_labels(result), ["a", "group"])
        self.assertFalse(any(element.is_top_mode() for element in result))

    @override_settings(MENU_CONFIG=f"{MODULE}.TUPLE_MENU", MENU_TOP_MODE=True)
    def test_top_mode_setting(self):
        result = build_menu(self.request)
        self.assertTrue(all(element.is_top_mode() for element in result))

    @override_settings(MENU_CONFIG=f"{MODULE}.MANAGER_MENU", MENU_TOP_MODE=True)
    def test_top_mode_setting_leaves_configured_manager_alone(self):
        build_menu(self.request)
        self.assertFalse(MANAGER_MENU.is_top_mode())


# ======================================================================
# conf
# ======================================================================


class HomeUrlTests(SimpleTestCase):
    def test_default_home(self):
        self.assertEqual(conf.home_url(), "/")

    @override_settings(MENU_HOME_URL_NAME="no_such_view")
    def test_unreversible_home_logs_warning(self):
        with self.assertLogs("menu_manager.conf", level="WARNING"):
            self.assertIsNone(conf.home_url())

    @override_settings(MENU_HOME_URL_NAME="")
    def test_disabled_home(self):
        self.assertIsNone(conf.home_url())
