import pytest

from qmlkit.qmldir import parse_qmldir, parse_qmldir_file


def test_parse_qmldir():
    text = (
        "module QtQuick\n"
        "linktarget Qt6::qtquick2plugin\n"
        "optional plugin qtquick2plugin\n"
        "classname QtQuick2Plugin\n"
        "designersupported\n"
        "typeinfo plugins.qmltypes\n"
        "import QtQml auto\n"
        "prefer :/qt-project.org/imports/QtQuick/\n"
    )
    module = parse_qmldir(text)
    assert module.name == "QtQuick"
    assert module.type_info == "plugins.qmltypes"
    assert module.imports == ["QtQml"]


def test_parse_qmldir_with_depends_and_comments():
    text = (
        "# Example module\n"
        "module QtQuick.Controls\n"
        "depends QtQuick 2.15\n"
        "depends QtQuick.Templates 2.15\n"
        "typeinfo plugins.qmltypes\n"
    )
    module = parse_qmldir(text)
    assert module.name == "QtQuick.Controls"
    assert module.depends == ["QtQuick", "QtQuick.Templates"]


def test_keyword_without_value_is_ignored():
    module = parse_qmldir("module\ntypeinfo\n")
    assert module.name == ""
    assert module.type_info == ""


def test_parse_qmldir_file_sets_dir(tmp_path):
    path = tmp_path / "qmldir"
    path.write_text("module FakeMod\ntypeinfo fake.qmltypes\n")
    module = parse_qmldir_file(path)
    assert module.name == "FakeMod"
    assert module.type_info == "fake.qmltypes"
    assert module.dir == str(tmp_path)


def test_parse_qmldir_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_qmldir_file(tmp_path / "absent" / "qmldir")