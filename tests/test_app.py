import io
import json
from pathlib import Path

from vocabulary.app import load_settings, run
from vocabulary.config import Options, Settings
from vocabulary.domain import Card
from vocabulary.store import MemoryCardStore


def test_run_without_manual_input_does_nothing():
    stdin = io.StringIO("Hello\n")
    stdout = io.StringIO()

    cards = run(Options(colorize=True), stdin=stdin, stdout=stdout)

    assert cards == []
    assert stdout.getvalue() == ""
    assert stdin.read() == "Hello\n"


def test_run_manual_input_uses_injected_store():
    store = MemoryCardStore()

    cards = run(
        Options(manual_input=True),
        stdin=io.StringIO("Hello\nWorld\nEOF\ny\nn\n"),
        stdout=io.StringIO(),
        store=store,
        end_marker="EOF",
    )

    assert cards == [Card("Hello", "World")]
    assert store.load() == cards


def test_run_manual_input_writes_to_archive_dir(tmp_path):
    settings = Settings(archive_dir=str(tmp_path / "archive"))

    run(
        Options(manual_input=True),
        settings,
        stdin=io.StringIO("Hello\nWorld\nEOF\n\nn\n"),
        stdout=io.StringIO(),
        end_marker="EOF",
    )

    lines = settings.card_store_path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line) for line in lines] == [{"title": "Hello", "content": "World"}]


def test_load_settings_without_file_returns_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_settings() == Settings()


def test_load_settings_overlays_configuration_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configurations").mkdir()
    (tmp_path / "configurations" / "vocabulary.yaml").write_text(
        "archive_dir: decks\n"
        "os: Linux\n"
        "unknown: ignored\n",
        encoding="utf-8",
    )

    settings = load_settings()

    assert settings.archive_dir == "decks"
    assert settings.os == "Linux"
    assert settings.encoding == "UTF-8"
    assert settings.card_store_path == Path("decks") / "cards.jsonl"


def test_run_reads_settings_from_configuration_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configurations").mkdir()
    (tmp_path / "configurations" / "vocabulary.yaml").write_text("archive_dir: decks\n", encoding="utf-8")

    run(
        Options(manual_input=True),
        stdin=io.StringIO("Hello\nWorld\nEOF\ny\nn\n"),
        stdout=io.StringIO(),
        end_marker="EOF",
    )

    assert (tmp_path / "decks" / "cards.jsonl").exists()


def test_load_settings_ignores_nested_values(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configurations").mkdir()
    (tmp_path / "configurations" / "vocabulary.yaml").write_text(
        "archive_dir:\n"
        "  a: 1\n"
        "cache_dir: [one, two]\n"
        "encoding: latin-1\n",
        encoding="utf-8",
    )

    settings = load_settings()

    assert settings.archive_dir == "archive"
    assert settings.cache_dir == "cache"
    assert settings.encoding == "latin-1"
