import io
import sys

from wisata_app.app import MainWindow, Page
from wisata_app.cli import main, run_session


def _run(lines, window=None):
    window = window or MainWindow()
    out = io.StringIO()
    run_session(window, lines, out)
    return window, out.getvalue().splitlines()


def test_admin_session_lists_initial_data():
    window, output = _run(["login admin secret", "kelola", "daftar"])
    assert window.current is Page.CRUD
    assert "Khanoman sang petualang - 2025 - Shanum" in output
    assert "Efootbal Sang Juara - 2025 - S" in output


def test_tambah_then_listed():
    window, output = _run(
        ["login admin secret", "kelola", "tambah Pantai | Bali | Indah", "daftar"]
    )
    assert "Buku berhasil ditambahkan!" in output
    assert output[-1] == "Pantai - Bali - Indah"
    assert len(window.crud_page.wisata_list) == 3


def test_hapus_and_ubah():
    window, output = _run(
        [
            "login admin secret",
            "kelola",
            "hapus Efootbal Sang Juara",
            "ubah Khanoman sang petualang|Baru|Kota|Cerita",
        ]
    )
    assert "Buku berhasil dihapus!" in output
    assert "Buku berhasil diubah!" in output
    assert window.crud_page.daftar() == ["Baru - Kota - Cerita"]


def test_wrong_credentials_reported():
    window, output = _run(["login admin password"])
    assert window.current is Page.LOGIN
    assert output == ["Error: Username atau password salah."]


def test_missing_fields_reported():
    window, output = _run(["login admin secret", "kelola", "tambah Pantai | | Indah"])
    assert output[-1] == "Error: Harap lengkapi semua data buku."
    assert len(window.crud_page.wisata_list) == 2


def test_user_cannot_edit():
    window, output = _run(["login user password", "kelola", "hapus Efootbal Sang Juara"])
    assert output[-1].startswith("Error:")
    assert len(window.crud_page.wisata_list) == 2


def test_command_not_available_on_page():
    window, output = _run(["kelola"])
    assert window.current is Page.LOGIN
    assert output == ["Perintah tidak dikenal: kelola"]


def test_help_navigation_and_exit_stops_processing():
    window, output = _run(
        ["login admin secret", "kelola", "help", "kembali", "keluar", "kembali"]
    )
    assert window.current is Page.CRUD


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(
        sys, "stdin", io.StringIO("login admin secret\nkelola\ndaftar\n")
    )
    assert main([]) == 0
    captured = capsys.readouterr().out.splitlines()
    assert captured[0] == "Login berhasil (admin)."
    assert captured[1:] == [
        "Khanoman sang petualang - 2025 - Shanum",
        "Efootbal Sang Juara - 2025 - S",
    ]