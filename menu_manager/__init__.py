from .elements import Icon, MenuElement, MenuElements, MenuGroup, MenuItem
from .fillers import MenuFiller, menu_icon
from .manager import MenuManager, build_menu, load_menu

__all__ = [
    "Icon",
    "MenuElement",
    "MenuElements",
    "MenuGroup",
    "MenuItem",
    "MenuFiller",
    "menu_icon",
    "MenuManager",
    "build_menu",
    "load_menu",
]
