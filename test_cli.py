"""Tests for the gendiff command line interface."""

import json

import pytest
from gendiff.cli import main


@pytest.fixture
def files(tmp_path):
    first = tmp_path / "file1.json"
    second = tmp_path / "file2.yml"
    first.write_text(json.dumps({"host": "hexlet.io", "timeout": 50, "proxy": "123.234.53.22"}))
    second.write_text("host: hexlet.io\ntimeout: 20\nverbose: true\n")
    return str(first), str(second)


class TestMain:
    """Test CLI entry point."""

    def test_default_stylish(self, files, capsys):
        assert main(list(files)) == 0
        assert capsys.readouterr().out == (
            '{\n'
            '    host: "hexlet.io"\n'
            '  - proxy: "123.234.53.22"\n'
            '  - timeout: 50\n'
            '  + timeout: 20\n'
            '  + verbose: true\n'
            '}\n'
        )

    def test_plain(self, files, capsys):
        assert main(["-f", "plain", *files]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Property 'proxy' was removed",
            "Property 'timeout' was updated. From 50 to 20",
            "Property 'verbose' was added with value: true",
        ]

    def test_json(self, files, capsys):
        assert main(["--format", "json", *files]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["timeout"] == {"type": "changed", "oldValue": 50, "newValue": 20}

    def test_unknown_format_is_usage_error(self, files, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["-f", "xml", *files])
        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_missing_arguments(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["only_one.json"])
        assert exc_info.value.code == 2

    def test_missing_file(self, tmp_path, capsys):
        existing = tmp_path / "a.json"
        existing.write_text("{}")
        assert main([str(existing), str(tmp_path / "nope.json")]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error:")

    def test_unsupported_extension(self, tmp_path, capsys):
        path = tmp_path / "a.txt"
        path.write_text("{}")
        assert main([str(path), str(path)]) == 1
        assert "Unsupported file format" in capsys.readouterr().err

    def test_malformed_document(self, tmp_path, capsys):
        good = tmp_path / "a.json"
        bad = tmp_path / "b.json"
        good.write_text("{}")
        bad.write_text("{oops")
        assert main([str(good), str(bad)]) == 1
        assert "Failed to parse" in capsys.readouterr().err

    def test_recursive_document(self, tmp_path, capsys):
        cyclic = tmp_path / "a.yml"
        other = tmp_path / "b.yml"
        cyclic.write_text("x: &x\n  y: *x\n")
        other.write_text("x: 1\n")
        assert main([str(cyclic), str(other)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "recursive alias" in captured.err

    def test_log_level(self, files, capsys):
        assert main(["--log-level", "DEBUG", "-f", "plain", *files]) == 0
        assert "Property 'proxy' was removed" in capsys.readouterr().out
