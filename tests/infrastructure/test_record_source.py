"""XML Record Source tests — parsing, ordering, and load failures.

Tests cover:
    - Fixture dataset loads in file order with derived full names
    - Unknown row elements are ignored
    - Missing file, malformed XML, non-integer age → RecordSourceError
    - Every load re-reads the file
"""

import pytest

from usersearch.core.errors import RecordSourceError
from usersearch.infrastructure.record_source import XmlRecordSource


def _write(tmp_path, body: str):
    path = tmp_path / "dataset.xml"
    path.write_text(f"<root>{body}</root>", encoding="utf-8")
    return path


def _row(id: int, first: str = "Ada", last: str = "Lovelace", age: str = "36") -> str:
    return (
        f"<row><id>{id}</id><guid>g-{id}</guid><age>{age}</age>"
        f"<first_name>{first}</first_name><last_name>{last}</last_name>"
        f"<gender>female</gender><about>about {id}</about>"
        f"<company>ACME</company></row>"
    )


def test_loads_fixture_dataset_in_file_order(dataset_path):
    records = XmlRecordSource(dataset_path).load()
    assert [r.id for r in records] == [0, 1, 2, 3, 4, 5, 6]
    boyd = records[0]
    assert boyd.full_name == "Boyd Wolf"
    assert boyd.age == 22
    assert boyd.gender == "male"
    assert boyd.about.startswith("Nulla cillum enim")
    assert boyd.about.endswith("labore ipsum.\n")


def test_unknown_elements_are_ignored(tmp_path):
    records = XmlRecordSource(_write(tmp_path, _row(7))).load()
    assert len(records) == 1
    assert records[0].guid == "g-7"
    assert records[0].about == "about 7"


def test_empty_root_yields_no_records(tmp_path):
    assert XmlRecordSource(_write(tmp_path, "")).load() == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(RecordSourceError) as exc:
        XmlRecordSource(tmp_path / "nope.xml").load()
    assert "failed to read file" in exc.value.message


def test_malformed_xml_raises(tmp_path):
    path = tmp_path / "dataset.xml"
    path.write_text("<root><row>", encoding="utf-8")
    with pytest.raises(RecordSourceError) as exc:
        XmlRecordSource(path).load()
    assert "failed to parse XML" in exc.value.message


def test_non_integer_age_raises(tmp_path):
    with pytest.raises(RecordSourceError) as exc:
        XmlRecordSource(_write(tmp_path, _row(1, age="old"))).load()
    assert "invalid row" in exc.value.message


def test_each_load_rereads_file(tmp_path):
    path = _write(tmp_path, _row(1))
    source = XmlRecordSource(path)
    assert len(source.load()) == 1
    path.write_text(f"<root>{_row(1)}{_row(2)}</root>", encoding="utf-8")
    assert len(source.load()) == 2
