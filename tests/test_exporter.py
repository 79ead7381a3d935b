import re

import pytest

from set_harvester.core.exceptions import OutputWriteError
from set_harvester.services.exporter import sanitize_filename, write_html, write_text_atomic

SAFE_NAME = re.compile(r"^[A-Za-z0-9_-]+\.html$")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Base Set", "BaseSet.html"),
        ("Sword & Shield: Brilliant Stars", "SwordShieldBrilliantStars.html"),
        ("XY-Promo_2014", "XY-Promo_2014.html"),
        ("Pokémon GO", "PokmonGO.html"),
        ("../../etc/passwd", "etcpasswd.html"),
    ],
)
def test_sanitize_filename_strips_unsafe_characters(name, expected) -> None:
    assert sanitize_filename(name) == expected
    assert SAFE_NAME.match(sanitize_filename(name))


def test_sanitize_filename_falls_back_for_empty_stem() -> None:
    assert sanitize_filename("!!! ???") == "set.html"
    assert sanitize_filename("") == "set.html"


def test_write_html_overwrites_and_leaves_no_temp_file(tmp_path) -> None:
    first = write_html(tmp_path, "Base Set", "<html>old</html>")
    second = write_html(tmp_path, "Base Set", "<html>new</html>")

    assert first == second == tmp_path / "BaseSet.html"
    assert second.read_text(encoding="utf-8") == "<html>new</html>"
    assert [p.name for p in tmp_path.iterdir()] == ["BaseSet.html"]


def test_write_html_raises_typed_error_and_cleans_up(tmp_path) -> None:
    (tmp_path / "BaseSet.html").mkdir()

    with pytest.raises(OutputWriteError) as excinfo:
        write_html(tmp_path, "Base Set", "<html></html>")

    assert excinfo.value.path == tmp_path / "BaseSet.html"
    assert not (tmp_path / ".BaseSet.html.tmp").exists()


def test_write_html_unencodable_markup_is_an_output_error(tmp_path) -> None:
    with pytest.raises(OutputWriteError):
        write_html(tmp_path, "Base Set", "<p>\ud83d</p>")

    assert list(tmp_path.iterdir()) == []


def test_write_text_atomic_keeps_old_file_when_replace_fails(tmp_path, monkeypatch) -> None:
    target = tmp_path / "BaseSet.html"
    target.write_text("<html>old</html>", encoding="utf-8")

    def fail_replace(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr("set_harvester.services.exporter.os.replace", fail_replace)

    with pytest.raises(OutputWriteError):
        write_text_atomic(target, "<html>new</html>")

    assert target.read_text(encoding="utf-8") == "<html>old</html>"
    assert [p.name for p in tmp_path.iterdir()] == ["BaseSet.html"]
