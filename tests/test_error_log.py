import json

import pytest

from set_harvester.core.exceptions import InputFileError, OutputWriteError
from set_harvester.models.records import ErrorLogEntry
from set_harvester.services.error_log import ErrorLog


def test_error_log_starts_as_empty_array(tmp_path) -> None:
    path = tmp_path / "logs" / "failed.json"
    log = ErrorLog(path)

    assert json.loads(path.read_text(encoding="utf-8")) == []
    assert log.entries() == []


def test_error_log_appends_and_keeps_existing_entries(tmp_path) -> None:
    path = tmp_path / "failed.json"
    path.write_text(
        json.dumps([{"name": "Old", "link": "https://example.test/old", "error": "boom"}]),
        encoding="utf-8",
    )

    log = ErrorLog(path)
    log.append(ErrorLogEntry(name="Jungle", link="https://example.test/jungle", error="timeout"))

    assert [e.name for e in log.entries()] == ["Old", "Jungle"]
    assert json.loads(path.read_text(encoding="utf-8"))[1] == {
        "name": "Jungle",
        "link": "https://example.test/jungle",
        "error": "timeout",
    }


@pytest.mark.parametrize("content", ["not json", "{\"name\": \"x\"}"])
def test_error_log_rejects_unusable_file(tmp_path, content) -> None:
    path = tmp_path / "failed.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(InputFileError):
        ErrorLog(path)


def test_error_log_append_failure_is_typed_and_keeps_valid_json(tmp_path, monkeypatch) -> None:
    path = tmp_path / "failed.json"
    log = ErrorLog(path)
    log.append(ErrorLogEntry(name="Old", link="https://example.test/old", error="boom"))

    def fail_replace(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr("set_harvester.services.exporter.os.replace", fail_replace)

    with pytest.raises(OutputWriteError):
        log.append(ErrorLogEntry(name="Jungle", link="https://example.test/jungle", error="timeout"))

    assert [e["name"] for e in json.loads(path.read_text(encoding="utf-8"))] == ["Old"]
    assert [p.name for p in tmp_path.iterdir()] == ["failed.json"]


def test_error_log_unreadable_file_is_an_output_error(tmp_path) -> None:
    path = tmp_path / "failed.json"
    log = ErrorLog(path)
    path.unlink()
    path.mkdir()

    with pytest.raises(OutputWriteError):
        log.append(ErrorLogEntry(name="Jungle", link="https://example.test/jungle", error="timeout"))
