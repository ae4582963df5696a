"""The application's pages: login, dashboard, data management and help."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from .wisata import WisataList

# username -> (password, is_admin)
DEFAULT_ACCOUNTS: dict[str, tuple[str, bool]] = {
    "admin": ("secret", True),
    "user": ("password", False),
}

INITIAL_WISATA: tuple[tuple[str, str, str], ...] = (
    ("Khanoman sang petualang", "2025", "Shanum"),
    ("Efootbal Sang Juara", "2025", "S"),
)


class Signal:
    """A list of callbacks that are all called, in order, on emit."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)


class LoginError(Exception):
    """Raised when a username and password do not match an account."""


class InputError(ValueError):
    """Raised when a form is submitted with required fields left empty."""


class LoginPage:
    """Checks credentials and announces a successful login."""

    def __init__(self, accounts: Mapping[str, tuple[str, bool]] | None = None) -> None:
        self.accounts = dict(DEFAULT_ACCOUNTS if accounts is None else accounts)
        self.login_berhasil = Signal()

    def login(self, username: str, password: str) -> bool:
        """Log in and return whether the account is an administrator."""
        account = self.accounts.get(username)
        if account is None or account[0] != password:
            raise LoginError("Username atau password salah.")
        is_admin = account[1]
        self.login_berhasil.emit(is_admin)
        return is_admin


class DashboardPage:
    """Landing page after login; leads to data management."""

    def __init__(self) -> None:
        self.kelola_data = Signal()

    def kelola_data_clicked(self) -> None:
        self.kelola_data.emit()


class CrudPage:
    """Lists destinations and, in edit mode, adds, removes and changes them."""

    def __init__(self) -> None:
        self.wisata_list = WisataList()
        for nama, lokasi, deskripsi in INITIAL_WISATA:
            self.wisata_list.tambah_wisata(nama, lokasi, deskripsi)
        self.edit_mode = True
        self.back_to_dashboard = Signal()
        self.help_requested = Signal()

    def set_edit_mode(self, is_admin: bool) -> None:
        """Allow editing and help only for administrators."""
        self.edit_mode = bool(is_admin)

    def _require_edit_mode(self) -> None:
        if not self.edit_mode:
            raise PermissionError("Hanya admin yang dapat mengubah data.")

    def tambah_wisata(self, nama: str, lokasi: str, deskripsi: str) -> str:
        self._require_edit_mode()
        if not (nama and lokasi and deskripsi):
            raise InputError("Harap lengkapi semua data buku.")
        self.wisata_list.tambah_wisata(nama, lokasi, deskripsi)
        return "Buku berhasil ditambahkan!"

    def hapus_wisata(self, nama: str) -> str:
        self._require_edit_mode()
        if not nama:
            raise InputError("Masukkan nama wisata yang ingin dihapus.")
        self.wisata_list.hapus_wisata(nama)
        return "Buku berhasil dihapus!"

    def ubah_wisata(
        self, nama_lama: str, nama_baru: str, lokasi_baru: str, deskripsi_baru: str
    ) -> str:
        self._require_edit_mode()
        if not (nama_lama and nama_baru and lokasi_baru and deskripsi_baru):
            raise InputError("Harap lengkapi semua data.")
        self.wisata_list.ubah_wisata(nama_lama, nama_baru, lokasi_baru, deskripsi_baru)
        return "Buku berhasil diubah!"

    def daftar(self) -> list[str]:
        """The lines currently shown in the list."""
        return self.wisata_list.daftar_wisata()

    def back_clicked(self) -> None:
        self.back_to_dashboard.emit()

    def help_clicked(self) -> None:
        self._require_edit_mode()
        self.help_requested.emit()


class HelpPage:
    """Help text page with a way back to data management."""

    def __init__(self) -> None:
        self.back_to_crud = Signal()

    def back_clicked(self) -> None:
        self.back_to_crud.emit()