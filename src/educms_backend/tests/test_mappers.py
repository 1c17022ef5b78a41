import pytest

from educms_backend.mappers import (
    coerce_foreign_keys,
    coerce_integer,
    map_request_body,
    map_response_body,
)
from educms_types.tables import LOGICAL_TABLES, LogicalTable


@pytest.mark.unit
class TestFieldMapping:
    """Translation between legacy field names and storage columns."""

    @pytest.mark.parametrize("table", [t.value for t in LogicalTable])
    def test_request_then_response_restores_mapped_fields(self, table):
        spec = LOGICAL_TABLES[LogicalTable(table)]
        body = {legacy: f"value-{legacy}" for legacy in spec.fields}
        body["untouched"] = 1

        restored = map_response_body(table, map_request_body(table, body))

        assert restored == body

    def test_request_mapping_renames_only_known_fields(self):
        mapped = map_request_body("kuis", {"judul": "Kuis 1", "durasi": 30})

        assert mapped == {"title": "Kuis 1", "durasi": 30}

    def test_unknown_table_is_identity(self):
        body = {"nama_kelas": "Math"}

        assert map_request_body("rewards", body) == body
        assert map_request_body("no_such_table", body) == body
        assert map_response_body("no_such_table", [body]) == [body]

    def test_inputs_are_not_mutated(self):
        body = {"nama_kelas": "Math", "id_guru": "7"}
        rows = [{"name": "Math", "teacher_id": 7}]

        map_request_body("kelas", body)
        map_response_body("kelas", rows)
        coerce_foreign_keys("kelas", {"teacher_id": "7"})

        assert body == {"nama_kelas": "Math", "id_guru": "7"}
        assert rows == [{"name": "Math", "teacher_id": 7}]

    def test_response_mapping_handles_single_record_and_none(self):
        assert map_response_body("forum", {"content": "Halo"}) == {"isi": "Halo"}
        assert map_response_body("forum", None) is None


@pytest.mark.unit
class TestIntegerCoercion:

    @pytest.mark.parametrize("value,expected", [
        ("7", 7),
        (" 12 ", 12),
        (3, 3),
        (4.0, 4),
        ("", ""),
        (None, None),
        (0, 0),
        ("abc", "abc"),
        ("1.5", "1.5"),
        (2.5, 2.5),
    ])
    def test_coerce_integer(self, value, expected):
        assert coerce_integer(value) == expected

    def test_booleans_are_left_alone(self):
        assert coerce_integer(True) is True

    def test_foreign_key_columns_on_any_table(self):
        body = {"category_id": "1", "room_id": "2", "quiz_id": "3", "question_id": "4", "title": "5"}

        assert coerce_foreign_keys("questions", body) == {
            "category_id": 1,
            "room_id": 2,
            "quiz_id": 3,
            "question_id": 4,
            "title": "5",
        }

    def test_table_specific_integer_columns(self):
        assert coerce_foreign_keys("kelas", {"teacher_id": "7"}) == {"teacher_id": 7}
        assert coerce_foreign_keys("categories", {"teacher_id": "7"}) == {"teacher_id": 7}
        assert coerce_foreign_keys("profiles", {"teacher_id": "7"}) == {"teacher_id": "7"}
