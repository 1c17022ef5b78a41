"""
Table registry for the EduCMS API.

The API exposes a closed set of table identifiers: the legacy logical names
used by the dashboard (``kelas``, ``pengguna``, ...) and the physical table
names of the storage backend. Anything else is not routable.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Union


class PhysicalTable(str, Enum):
    """Tables of the hosted storage backend."""
    CATEGORIES = "categories"
    CHAT_ROOMS = "chat_rooms"
    MATERI = "materi"
    MESSAGES = "messages"
    NOTIFICATIONS = "notifications"
    OPTIONS = "options"
    PROFILES = "profiles"
    QUESTIONS = "questions"
    QUIZ_ATTEMPTS = "quiz_attempts"
    QUIZZES = "quizzes"
    REWARDS = "rewards"
    USER_FAVORITES = "user_favorites"
    ASSIGNMENTS = "assignments"


class LogicalTable(str, Enum):
    """Legacy table names used by the dashboard client."""
    KELAS = "kelas"
    PENGGUNA = "pengguna"
    MATERI = "materi"
    TUGAS = "tugas"
    KUIS = "kuis"
    FORUM = "forum"


# Columns holding foreign keys that the backend stores as integers.
FOREIGN_KEY_FIELDS: FrozenSet[str] = frozenset({
    "category_id",
    "room_id",
    "quiz_id",
    "question_id",
})


@dataclass(frozen=True)
class TableSpec:
    """
    Routing and translation rules for one routable table name.

    Attributes:
        name: Name used in the URL path
        physical: Backend table the name resolves to
        fields: Legacy field name -> physical column name
        integer_columns: Extra physical columns coerced to int on write
    """
    name: str
    physical: PhysicalTable
    fields: Mapping[str, str] = field(default_factory=dict)
    integer_columns: FrozenSet[str] = frozenset()

    def __post_init__(self):
        columns = list(self.fields.values())
        if len(set(columns)) != len(columns):
            raise ValueError(f"Field mapping for '{self.name}' is not one-to-one")
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def reverse_fields(self) -> Mapping[str, str]:
        """Physical column name -> legacy field name."""
        return {column: legacy for legacy, column in self.fields.items()}

    @property
    def coerced_columns(self) -> FrozenSet[str]:
        return FOREIGN_KEY_FIELDS | self.integer_columns


LOGICAL_TABLES: Mapping[LogicalTable, TableSpec] = MappingProxyType({
    LogicalTable.KELAS: TableSpec(
        name=LogicalTable.KELAS.value,
        physical=PhysicalTable.CATEGORIES,
        fields={
            "nama_kelas": "name",
            "deskripsi": "description",
            "id_guru": "teacher_id",
            "gambar": "image_url",
        },
        integer_columns=frozenset({"teacher_id"}),
    ),
    LogicalTable.PENGGUNA: TableSpec(
        name=LogicalTable.PENGGUNA.value,
        physical=PhysicalTable.PROFILES,
        fields={
            "nama_lengkap": "full_name",
            "peran": "role",
            "foto_profil": "avatar_url",
        },
    ),
    LogicalTable.MATERI: TableSpec(
        name=LogicalTable.MATERI.value,
        physical=PhysicalTable.MATERI,
        fields={
            "id_kelas": "category_id",
            "tautan_file": "file_url",
        },
    ),
    LogicalTable.TUGAS: TableSpec(
        name=LogicalTable.TUGAS.value,
        physical=PhysicalTable.ASSIGNMENTS,
        fields={
            "id_kelas": "category_id",
            "batas_waktu": "due_date",
            "tautan_file": "file_url",
        },
    ),
    LogicalTable.KUIS: TableSpec(
        name=LogicalTable.KUIS.value,
        physical=PhysicalTable.QUIZZES,
        fields={
            "id_kelas": "category_id",
            "judul": "title",
            "waktu_mulai": "start_time",
            "waktu_selesai": "end_time",
        },
    ),
    LogicalTable.FORUM: TableSpec(
        name=LogicalTable.FORUM.value,
        physical=PhysicalTable.MESSAGES,
        fields={
            "id_kelas": "room_id",
            "id_pengguna": "user_id",
            "isi": "content",
        },
    ),
})


def _physical_spec(table: PhysicalTable) -> TableSpec:
    integer_columns = frozenset()
    for spec in LOGICAL_TABLES.values():
        if spec.physical is table:
            integer_columns = spec.integer_columns
    return TableSpec(name=table.value, physical=table, integer_columns=integer_columns)


def resolve_table(name: Union[str, LogicalTable, PhysicalTable]) -> Optional[TableSpec]:
    """
    Resolve a table name from the URL to its routing rules.

    Logical names win over physical ones (``materi`` is both). Physical names
    resolve to themselves without field translation.

    Returns:
        The TableSpec, or None when the name is not routable
    """
    if isinstance(name, Enum):
        name = name.value
    try:
        return LOGICAL_TABLES[LogicalTable(name)]
    except ValueError:
        pass
    try:
        return _physical_spec(PhysicalTable(name))
    except ValueError:
        return None


def routable_tables() -> FrozenSet[str]:
    return frozenset(t.value for t in LogicalTable) | frozenset(t.value for t in PhysicalTable)


# Dashboard counter name -> table it counts.
DASHBOARD_COUNTERS: Mapping[str, PhysicalTable] = MappingProxyType({
    "kelas": PhysicalTable.CATEGORIES,
    "pengguna": PhysicalTable.PROFILES,
    "materi": PhysicalTable.MATERI,
    "kuis": PhysicalTable.QUIZZES,
    "forum": PhysicalTable.MESSAGES,
    "pengumpulan": PhysicalTable.QUIZ_ATTEMPTS,
})
