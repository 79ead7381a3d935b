import json

import pytest

from set_harvester.core.exceptions import InputFileError
from set_harvester.models.records import SetRecord
from set_harvester.services.records_loader import load_records


def test_load_records_reads_name_and_link(tmp_path) -> None:
    path = tmp_path / "sets.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Base Set", "link": "https://example.test/base"},
                {"name": "Jungle", "link": "https://example.test/jungle"},
            ]
        ),
        encoding="utf-8",
    )

    records = load_records(path)

    assert records == [
        SetRecord(name="Base Set", link="https://example.test/base"),
        SetRecord(name="Jungle", link="https://example.test/jungle"),
    ]


def test_records_are_immutable() -> None:
    record = SetRecord(name="Base Set", link="https://example.test/base")
    with pytest.raises(Exception):
        record.name = "Other"


@pytest.mark.parametrize(
    "content, reason",
    [
        ("[{\"name\": \"Base Set\",", "malformed JSON"),
        ("{\"name\": \"Base Set\"}", "expected a JSON array"),
        ("[{\"name\": \"Base Set\"}]", "invalid set record"),
        ("[{\"name\": \"Base Set\", \"link\": \"\"}]", "invalid set record"),
    ],
)
def test_load_records_rejects_bad_input(tmp_path, content, reason) -> None:
    path = tmp_path / "sets.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(InputFileError) as excinfo:
        load_records(path)

    assert reason in excinfo.value.reason


def test_load_records_missing_file(tmp_path) -> None:
    with pytest.raises(InputFileError):
        load_records(tmp_path / "missing.json")
