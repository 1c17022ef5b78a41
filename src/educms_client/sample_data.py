"""Local dataset shown when the server cannot be reached."""

import copy
from typing import Dict, List

from educms_types.envelopes import DashboardStats
from educms_types.tables import LogicalTable

SAMPLE_COLLECTIONS: Dict[LogicalTable, List[dict]] = {
    LogicalTable.KELAS: [
        {"id": 1, "nama_kelas": "Matematika Dasar", "deskripsi": "Aljabar dan aritmetika", "id_guru": 2},
        {"id": 2, "nama_kelas": "Bahasa Indonesia", "deskripsi": "Membaca dan menulis", "id_guru": 2},
    ],
    LogicalTable.PENGGUNA: [
        {"id": 1, "nama_lengkap": "Admin", "email": "admin@example.com", "peran": "admin"},
        {"id": 2, "nama_lengkap": "Budi Santoso", "email": "budi@example.com", "peran": "guru"},
        {"id": 3, "nama_lengkap": "Siti Aminah", "email": "siti@example.com", "peran": "siswa"},
    ],
    LogicalTable.MATERI: [
        {"id": 1, "id_kelas": 1, "judul": "Bilangan Bulat", "deskripsi": "Pengenalan bilangan bulat"},
    ],
    LogicalTable.TUGAS: [
        {"id": 1, "id_kelas": 1, "judul": "Latihan 1", "deskripsi": "Soal bilangan bulat",
         "batas_waktu": "2024-12-31T23:59:00"},
    ],
    LogicalTable.KUIS: [
        {"id": 1, "id_kelas": 1, "judul": "Kuis Bilangan", "waktu_mulai": "2024-12-01T08:00:00",
         "waktu_selesai": "2024-12-01T09:00:00"},
    ],
    LogicalTable.FORUM: [
        {"id": 1, "id_kelas": 1, "id_pengguna": 3, "isi": "Selamat pagi, Bu/Pak!"},
    ],
}


def sample_collections() -> Dict[LogicalTable, List[dict]]:
    return copy.deepcopy(SAMPLE_COLLECTIONS)


def sample_stats() -> DashboardStats:
    """Counters derived from the sample collections."""
    return DashboardStats(
        kelas=len(SAMPLE_COLLECTIONS[LogicalTable.KELAS]),
        pengguna=len(SAMPLE_COLLECTIONS[LogicalTable.PENGGUNA]),
        materi=len(SAMPLE_COLLECTIONS[LogicalTable.MATERI]),
        kuis=len(SAMPLE_COLLECTIONS[LogicalTable.KUIS]),
        forum=len(SAMPLE_COLLECTIONS[LogicalTable.FORUM]),
        pengumpulan=0,
    )
