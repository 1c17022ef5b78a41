"""Tests for the entity form payloads."""

from educms_types.entities import ForumForm, KelasForm, KuisForm, MateriForm, PenggunaForm


class TestEntityForms:

    def test_multipart_entities(self):
        assert KelasForm(nama_kelas="A").is_multipart
        assert MateriForm(judul="A").attachment_field == "tautan_file"
        assert not KuisForm(judul="A").is_multipart
        assert not ForumForm(isi="A").is_multipart

    def test_form_fields_skip_id_and_missing(self):
        form = KelasForm(id=3, nama_kelas="Seni", id_guru=4)

        assert form.form_fields() == {"nama_kelas": "Seni", "id_guru": "4"}

    def test_json_body_keeps_id(self):
        assert KuisForm(id=2, judul="Kuis").json_body() == {"id": 2, "judul": "Kuis"}

    def test_password_rules(self):
        new = PenggunaForm(nama_lengkap="A", email="a@example.com")
        edited = PenggunaForm(id="u", nama_lengkap="A", email="a@example.com")
        changed = PenggunaForm(id="u", nama_lengkap="A", email="a@example.com", password="pw")

        assert new.form_fields_for(is_edit=False)["password"] == "defaultpassword"
        assert "password" not in edited.form_fields_for(is_edit=True)
        assert changed.form_fields_for(is_edit=True)["password"] == "pw"

    def test_extra_fields_are_sent(self):
        assert KelasForm(nama_kelas="A", kategori="umum").form_fields()["kategori"] == "umum"
