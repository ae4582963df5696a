"""The main window: a stack of pages and the navigation between them."""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Union

from .pages import CrudPage, DashboardPage, HelpPage, LoginPage

AnyPage = Union[LoginPage, DashboardPage, CrudPage, HelpPage]


class Page(Enum):
    """The pages of the window, in stacking order."""

    LOGIN = 0
    DASHBOARD = 1
    CRUD = 2
    HELP = 3


class MainWindow:
    """Owns every page and switches the visible one in response to their signals."""

    def __init__(self, accounts: Mapping[str, tuple[str, bool]] | None = None) -> None:
        self.login_page = LoginPage(accounts)
        self.dashboard_page = DashboardPage()
        self.crud_page = CrudPage()
        self.help_page = HelpPage()
        self.current = Page.LOGIN

        self.login_page.login_berhasil.connect(self._on_login)
        self.dashboard_page.kelola_data.connect(lambda: self._show(Page.CRUD))
        self.crud_page.back_to_dashboard.connect(lambda: self._show(Page.DASHBOARD))
        self.help_page.back_to_crud.connect(lambda: self._show(Page.CRUD))
        self.crud_page.help_requested.connect(lambda: self._show(Page.HELP))

    def _show(self, page: Page) -> None:
        self.current = page

    def _on_login(self, is_admin: bool) -> None:
        self._show(Page.DASHBOARD)
        self.crud_page.set_edit_mode(is_admin)

    @property
    def current_widget(self) -> AnyPage:
        """The page object that is currently shown."""
        return {
            Page.LOGIN: self.login_page,
            Page.DASHBOARD: self.dashboard_page,
            Page.CRUD: self.crud_page,
            Page.HELP: self.help_page,
        }[self.current]