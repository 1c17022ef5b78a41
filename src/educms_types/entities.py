"""
Form payloads for the six dashboard entities.

Field names follow the legacy vocabulary of the dashboard; the backend
translates them to storage columns.
"""

from typing import Any, ClassVar, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict

from educms_types.tables import LogicalTable

Identifier = Union[int, str]


class EntityForm(BaseModel):
    """
    Base payload for create and update calls.

    ``id`` is only used to address the record on update and is never sent in
    multipart bodies.
    """
    table: ClassVar[LogicalTable]
    attachment_field: ClassVar[Optional[str]] = None

    id: Optional[Identifier] = None

    model_config = ConfigDict(extra="allow")

    @property
    def is_multipart(self) -> bool:
        return self.attachment_field is not None

    def form_fields(self) -> Dict[str, str]:
        """Payload as multipart text fields. Missing values are left out."""
        values = self.model_dump(exclude={"id"}, exclude_none=True)
        return {key: str(value) for key, value in values.items()}

    def json_body(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class KelasForm(EntityForm):
    table = LogicalTable.KELAS
    attachment_field = "gambar"

    nama_kelas: str
    deskripsi: Optional[str] = None
    id_guru: Optional[Identifier] = None


class PenggunaForm(EntityForm):
    table = LogicalTable.PENGGUNA
    attachment_field = "foto_profil"
    default_password: ClassVar[str] = "defaultpassword"

    nama_lengkap: str
    email: str
    peran: Optional[str] = None
    password: Optional[str] = None

    def form_fields_for(self, is_edit: bool) -> Dict[str, str]:
        """Only send a password on create or when a new one was entered."""
        fields = self.form_fields()
        fields.pop("password", None)
        if not is_edit or self.password:
            fields["password"] = self.password or self.default_password
        return fields


class MateriForm(EntityForm):
    table = LogicalTable.MATERI
    attachment_field = "tautan_file"

    id_kelas: Optional[Identifier] = None
    judul: str
    deskripsi: Optional[str] = None


class TugasForm(EntityForm):
    table = LogicalTable.TUGAS
    attachment_field = "tautan_file"

    id_kelas: Optional[Identifier] = None
    judul: str
    deskripsi: Optional[str] = None
    batas_waktu: Optional[str] = None


class KuisForm(EntityForm):
    table = LogicalTable.KUIS

    id_kelas: Optional[Identifier] = None
    judul: str
    waktu_mulai: Optional[str] = None
    waktu_selesai: Optional[str] = None


class ForumForm(EntityForm):
    table = LogicalTable.FORUM

    id_kelas: Optional[Identifier] = None
    id_pengguna: Optional[Identifier] = None
    isi: str
