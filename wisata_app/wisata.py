"""Tourist destinations and the ordered list that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class Wisata:
    """A single tourist destination."""

    nama: str
    lokasi: str
    deskripsi: str

    def __str__(self) -> str:
        return f"{self.nama} - {self.lokasi} - {self.deskripsi}"


class WisataList:
    """Destinations kept in insertion order, looked up by name."""

    def __init__(self) -> None:
        self._items: list[Wisata] = []

    def tambah_wisata(self, nama: str, lokasi: str, deskripsi: str) -> Wisata:
        """Append a new destination to the end of the list and return it."""
        wisata = Wisata(nama, lokasi, deskripsi)
        self._items.append(wisata)
        return wisata

    def _find(self, nama: str) -> Wisata | None:
        return next((w for w in self._items if w.nama == nama), None)

    def hapus_wisata(self, nama: str) -> bool:
        """Remove the first destination with this name.

        Returns whether anything was removed; an unknown name is ignored.
        """
        wisata = self._find(nama)
        if wisata is None:
            return False
        self._items.remove(wisata)
        return True

    def ubah_wisata(
        self, nama_lama: str, nama_baru: str, lokasi_baru: str, deskripsi_baru: str
    ) -> bool:
        """Replace the fields of the first destination named ``nama_lama``.

        Returns whether a destination was changed; an unknown name is ignored.
        """
        wisata = self._find(nama_lama)
        if wisata is None:
            return False
        wisata.nama = nama_baru
        wisata.lokasi = lokasi_baru
        wisata.deskripsi = deskripsi_baru
        return True

    def daftar_wisata(self) -> list[str]:
        """Return one "nama - lokasi - deskripsi" line per destination."""
        return [str(w) for w in self._items]

    def __iter__(self) -> Iterator[Wisata]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)