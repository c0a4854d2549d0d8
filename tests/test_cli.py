import pytest
from PIL import Image

from reaper_icon_forge import cli, config


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "source.png"
    Image.new('RGBA', (64, 48), (50, 100, 150, 255)).save(path)
    return path


def written(root):
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*.png"))


def test_automatic_export(tmp_path, source_file, capsys):
    dest = tmp_path / "out"
    code = cli.main([str(source_file), "--dest", str(dest), "--name", "Play!", "--scales", "100", "200"])

    assert code == 0
    assert written(dest) == [
        "toolbar_icons/200/Play.png",
        "toolbar_icons/Play.png",
        "track_icons/Play.png",
    ]
    assert str(dest / "toolbar_icons" / "Play.png") in capsys.readouterr().out


def test_toggle_and_multiple_sizes(tmp_path, source_file):
    dest = tmp_path / "out"
    code = cli.main([
        str(source_file), "--dest", str(dest), "--toggle", "--scales", "150",
        "--sizes", "64", "256", "--padding", "0.1",
    ])
    assert code == 0
    assert written(dest) == [
        "toolbar_icons/150/my_icon.png",
        "toolbar_icons/150/my_icon_on.png",
        "track_icons/my_icon_256.png",
        "track_icons/my_icon_64.png",
    ]


def test_manual_export(tmp_path, source_file):
    dest = tmp_path / "out"
    code = cli.main([
        "--manual", str(source_file), str(source_file), str(source_file),
        "--dest", str(dest), "--no-track", "--scales", "100",
    ])
    assert code == 0
    assert written(dest) == ["toolbar_icons/my_icon.png"]


def test_manual_toggle_without_on_images_fails(tmp_path, source_file):
    code = cli.main([
        "--manual", str(source_file), str(source_file), str(source_file),
        "--dest", str(tmp_path / "out"), "--toggle",
    ])
    assert code == 1
    assert not (tmp_path / "out").exists()


def test_manual_on_requires_manual(tmp_path, source_file):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([
            str(source_file), "--dest", str(tmp_path / "out"), "--toggle",
            "--manual-on", str(source_file), str(source_file), str(source_file),
        ])
    assert exc_info.value.code == 2
    assert not (tmp_path / "out").exists()


def test_manual_on_requires_toggle(tmp_path, source_file):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([
            "--manual", str(source_file), str(source_file), str(source_file),
            "--manual-on", str(source_file), str(source_file), str(source_file),
            "--dest", str(tmp_path / "out"),
        ])
    assert exc_info.value.code == 2
    assert not (tmp_path / "out").exists()


def test_missing_source_fails(tmp_path):
    assert cli.main(["--dest", str(tmp_path / "out")]) == 1


def test_empty_scales_fail(tmp_path, source_file):
    assert cli.main([str(source_file), "--dest", str(tmp_path), "--scales"]) == 1


def test_unreadable_source(tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"junk")
    assert cli.main([str(bad), "--dest", str(tmp_path / "out")]) == 1


def test_destination_required(source_file):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(source_file)])
    assert exc_info.value.code == 2


def test_padding_out_of_range(tmp_path, source_file):
    with pytest.raises(SystemExit):
        cli.main([str(source_file), "--dest", str(tmp_path), "--padding", "0.5"])


def test_reaper_destination(tmp_path, source_file, monkeypatch):
    data = tmp_path / "REAPER" / "Data"
    monkeypatch.setattr(config, "reaper_data_path", lambda home=None: data)

    assert cli.main([str(source_file), "--reaper", "--no-toolbar"]) == 0
    assert written(data) == ["track_icons/my_icon.png"]


def test_reaper_destination_missing(source_file, monkeypatch):
    monkeypatch.setattr(config, "reaper_data_path", lambda home=None: None)
    with pytest.raises(SystemExit):
        cli.main([str(source_file), "--reaper"])
