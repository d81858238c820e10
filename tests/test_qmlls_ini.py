import pytest

from qmlkit.qmlls_ini import find_and_parse_qmlls_ini, parse_qmlls_ini


def test_parse_qmlls_ini(tmp_path):
    ini = tmp_path / ".qmlls.ini"
    ini.write_text(
        "[General]\n"
        "no-cmake-calls=true\n"
        'buildDir="/tmp/quickshell/vfs/abc123"\n'
        'importPaths="/usr/lib/qt6/qml:/opt/custom/qml"\n'
    )
    config = parse_qmlls_ini(ini)
    assert config.build_dir == "/tmp/quickshell/vfs/abc123"
    assert config.import_paths == ["/usr/lib/qt6/qml", "/opt/custom/qml"]


def test_parse_qmlls_ini_skips_sections_and_comments(tmp_path):
    ini = tmp_path / ".qmlls.ini"
    ini.write_text('# comment\n[General]\nbuildDir="/some/path"\n[Other]\nfoo=bar\n')
    config = parse_qmlls_ini(ini)
    assert config.build_dir == "/some/path"
    assert config.import_paths == []


def test_parse_qmlls_ini_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_qmlls_ini(tmp_path / ".qmlls.ini")


def test_find_and_parse_qmlls_ini(tmp_path):
    (tmp_path / ".qmlls.ini").write_text('[General]\nbuildDir="/build"\n')
    config = find_and_parse_qmlls_ini(["/nonexistent", str(tmp_path)])
    assert config is not None
    assert config.build_dir == "/build"


def test_find_and_parse_qmlls_ini_returns_none_when_missing():
    assert find_and_parse_qmlls_ini(["/nonexistent"]) is None