# wisata-app

A small catalogue of tourist destinations (*wisata*). Each entry has a name (*nama*), a location (*lokasi*) and a description (*deskripsi*).

You sign in as an administrator or as a regular user. Administrators can add, change and remove entries. Regular users can only list them.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the application

```
wisata-app
```

The command reads one command per line from standard input and writes its replies to standard output. It stops at the end of input or at `keluar`, `quit` or `exit`. It takes no options other than `--help`.

Each command works only on the page it belongs to. On any other page it prints `Perintah tidak dikenal: <command>`. Failed logins, missing fields and editing attempts by a regular user print `Error: <message>` and leave the session running.

| Page | Command | Effect |
|------|---------|--------|
| Login | `login <username> <password>` | Sign in and go to the dashboard |
| Dashboard | `kelola` | Open data management |
| Data management | `daftar` | Print every entry as `nama - lokasi - deskripsi` |
| Data management | `tambah <nama> \| <lokasi> \| <deskripsi>` | Add an entry (admin only) |
| Data management | `hapus <nama>` | Remove the first entry with that name (admin only) |
| Data management | `ubah <nama lama> \| <nama baru> \| <lokasi baru> \| <deskripsi baru>` | Change an entry (admin only) |
| Data management | `kembali` | Back to the dashboard |
| Data management | `help` | Open the help page (admin only) |
| Help | `kembali` | Back to data management |

There are two built-in accounts:

| Username | Password | Role |
|----------|----------|------|
| `admin` | `secret` | administrator |
| `user` | `password` | regular user |

The catalogue starts with two sample entries. `hapus` and `ubah` report success even when no entry has the given name; in that case nothing changes.

Example session:

```
login admin secret
kelola
tambah Pantai Kuta | Bali | Pantai berpasir putih
daftar
keluar
```

## Using the catalogue from Python

`wisata_app.wisata.WisataList` is an ordered collection of `Wisata` entries:

```python
from wisata_app.wisata import WisataList

catalogue = WisataList()
catalogue.tambah_wisata("Candi Borobudur", "Magelang", "Candi Buddha terbesar")
catalogue.tambah_wisata("Pantai Kuta", "Bali", "Pantai berpasir putih")

catalogue.ubah_wisata("Pantai Kuta", "Pantai Kuta", "Badung, Bali", "Pantai untuk berselancar")
catalogue.hapus_wisata("Candi Borobudur")

print(catalogue.daftar_wisata())
# ['Pantai Kuta - Badung, Bali - Pantai untuk berselancar']
print(len(catalogue))
# 1
```

- `tambah_wisata` appends a new entry at the end and returns it.
- `hapus_wisata` removes the first entry with the given name and returns whether one was removed.
- `ubah_wisata` replaces the name, location and description of the first entry with the old name and returns whether one was changed.
- `daftar_wisata` returns every entry as `"nama - lokasi - deskripsi"`, in insertion order.
- Iterating over the list yields the `Wisata` entries themselves.

The pages are in `wisata_app.pages`: `LoginPage`, `DashboardPage`, `CrudPage` and `HelpPage`. They report what happened through `Signal` objects. `LoginPage` accepts its own mapping of `username -> (password, is_admin)`. `wisata_app.app.MainWindow` connects the pages and keeps the current `Page` in its `current` attribute. `wisata_app.cli.run_session(window, lines, out)` runs text commands against a window.

Invalid input raises an exception:

- A failed login raises `LoginError`.
- Missing fields on the data-management page raise `InputError`.
- Editing, or opening help, while signed in as a regular user raises `PermissionError`.

## What it does not do

- There is no graphical window. The only front end is the text-command session.
- The help page has no help text. It only lets you return to data management.
- Data is kept in memory only and is lost when the session ends.
- There is no logout and no way to go back to the login page.