import json

import pytest

from doccatalog import cli


@pytest.fixture(autouse=True)
def deterministic_env(monkeypatch):
    monkeypatch.setenv("DOCCATALOG_ID_STRATEGY", "counter")
    monkeypatch.setenv("DOCCATALOG_LOCALE", "en")


def test_list_prints_table(sample_tree, capsys) -> None:
    cli.main(["list", str(sample_tree)])

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("File")
    assert "a.txt" in lines[0]
    assert "Report.pdf" in lines[2] and "2 KB" in lines[2]


def test_list_search_and_json(sample_tree, capsys) -> None:
    cli.main(["list", str(sample_tree), "--search", "REPORT", "--json", "--locale", "ru"])

    rows = json.loads(capsys.readouterr().out)
    assert len(rows) == 1
    assert rows[0]["name"] == "Report.pdf"
    assert rows[0]["icon"] == "FileText"
    assert rows[0]["size"] == "2 KB"
    assert rows[0]["id"] == "doc-3"


def test_list_nothing_found(sample_tree, capsys) -> None:
    cli.main(["list", str(sample_tree), "-s", "xyz"])

    assert capsys.readouterr().out.strip() == "Nothing found"


def test_list_unreadable_paths_exit_1(tmp_path, caplog) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["list", str(tmp_path / "missing")])

    assert excinfo.value.code == 1
    assert "Cannot read" in caplog.text


def test_info_summarizes_by_icon(sample_tree, capsys) -> None:
    cli.main(["info", str(sample_tree)])

    out = capsys.readouterr().out
    assert "Documents: 3" in out
    assert "Image: 1" in out
    assert "FileText: 1" in out
    assert "File: 1" in out


def test_expand_archives_flag(tmp_path, capsys) -> None:
    import zipfile

    archive = tmp_path / "bundle.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("one.txt", "1")
        zf.writestr("two.mp3", "22")

    cli.main(["list", str(archive), "--json", "--expand-archives"])
    names = [row["name"] for row in json.loads(capsys.readouterr().out)]
    assert names == ["one.txt", "two.mp3"]

    cli.main(["list", str(archive), "--json"])
    rows = json.loads(capsys.readouterr().out)
    assert [(row["name"], row["icon"]) for row in rows] == [("bundle.zip", "Archive")]


def test_deck_command_hands_config_to_tui(monkeypatch, tmp_path) -> None:
    launched = {}

    def fake_main(catalog, start_dir, expand_archives):
        launched.update(catalog=catalog, start_dir=start_dir, expand=expand_archives)

    monkeypatch.setattr("doccatalog.deck.main", fake_main)

    cli.main(["deck", str(tmp_path)])

    assert launched["start_dir"] == tmp_path
    assert launched["catalog"].locale == "en"
    assert launched["expand"] is False


def test_locale_option_follows_the_paths(sample_tree, capsys) -> None:
    cli.main(["list", str(sample_tree), "--search", "xyz", "--locale", "ru"])
    assert capsys.readouterr().out.strip() == "Ничего не найдено"

    cli.main(["info", str(sample_tree), "--locale", "en"])
    assert "Documents: 3" in capsys.readouterr().out


def test_deck_accepts_locale_after_start_dir(monkeypatch, tmp_path) -> None:
    launched = {}
    monkeypatch.setattr(
        "doccatalog.deck.main",
        lambda catalog, start_dir, expand_archives: launched.update(catalog=catalog),
    )

    cli.main(["deck", str(tmp_path), "--locale", "ru", "--expand-archives"])

    assert launched["catalog"].locale == "ru"
