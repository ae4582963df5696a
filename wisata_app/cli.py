"""A line-oriented front end that drives the main window from text commands."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, TextIO

from .app import MainWindow, Page
from .pages import InputError, LoginError

_EXIT_COMMANDS = frozenset({"keluar", "quit", "exit"})


def _fields(rest: str, count: int) -> list[str]:
    parts = [part.strip() for part in rest.split("|")]
    if len(parts) != count:
        raise InputError(f"Diperlukan {count} kolom yang dipisahkan '|'.")
    return parts


def _login(window: MainWindow, rest: str, out: TextIO) -> None:
    parts = rest.split()
    if len(parts) != 2:
        raise InputError("Format: login <username> <password>")
    username, password = parts
    is_admin = window.login_page.login(username, password)
    print(f"Login berhasil ({'admin' if is_admin else 'user'}).", file=out)


def _kelola(window: MainWindow, rest: str, out: TextIO) -> None:
    window.dashboard_page.kelola_data_clicked()


def _daftar(window: MainWindow, rest: str, out: TextIO) -> None:
    for line in window.crud_page.daftar():
        print(line, file=out)


def _tambah(window: MainWindow, rest: str, out: TextIO) -> None:
    nama, lokasi, deskripsi = _fields(rest, 3)
    print(window.crud_page.tambah_wisata(nama, lokasi, deskripsi), file=out)


def _hapus(window: MainWindow, rest: str, out: TextIO) -> None:
    print(window.crud_page.hapus_wisata(rest.strip()), file=out)


def _ubah(window: MainWindow, rest: str, out: TextIO) -> None:
    nama_lama, nama_baru, lokasi_baru, deskripsi_baru = _fields(rest, 4)
    print(
        window.crud_page.ubah_wisata(nama_lama, nama_baru, lokasi_baru, deskripsi_baru),
        file=out,
    )


def _crud_kembali(window: MainWindow, rest: str, out: TextIO) -> None:
    window.crud_page.back_clicked()


def _help(window: MainWindow, rest: str, out: TextIO) -> None:
    window.crud_page.help_clicked()


def _help_kembali(window: MainWindow, rest: str, out: TextIO) -> None:
    window.help_page.back_clicked()


_Handler = Callable[[MainWindow, str, TextIO], None]

_COMMANDS: dict[tuple[Page, str], _Handler] = {
    (Page.LOGIN, "login"): _login,
    (Page.DASHBOARD, "kelola"): _kelola,
    (Page.CRUD, "daftar"): _daftar,
    (Page.CRUD, "tambah"): _tambah,
    (Page.CRUD, "hapus"): _hapus,
    (Page.CRUD, "ubah"): _ubah,
    (Page.CRUD, "kembali"): _crud_kembali,
    (Page.CRUD, "help"): _help,
    (Page.HELP, "kembali"): _help_kembali,
}


def run_session(window: MainWindow, lines: Iterable[str], out: TextIO) -> None:
    """Run commands against ``window`` until the input ends or an exit command."""
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        command, _, rest = line.partition(" ")
        command = command.lower()
        if command in _EXIT_COMMANDS:
            break
        handler = _COMMANDS.get((window.current, command))
        if handler is None:
            print(f"Perintah tidak dikenal: {command}", file=out)
            continue
        try:
            handler(window, rest.strip(), out)
        except (LoginError, InputError, PermissionError) as exc:
            print(f"Error: {exc}", file=out)


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input and run them against a new window."""
    parser = argparse.ArgumentParser(
        prog="wisata-app",
        description="Kelola data wisata lewat perintah teks dari standar input.",
    )
    parser.parse_args(argv)
    run_session(MainWindow(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())