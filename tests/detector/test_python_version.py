"""Tests for Python runtime version detection."""

from pathlib import Path

import pytest

from slug_processor.detector.python_version import (
    DEFAULT_PYTHON_VERSION,
    detect_python_version,
    extract_pyproject_python,
    extract_runtime_python,
)


def _write(repo: Path, name: str, content: str) -> None:
    (repo / name).write_text(content, encoding="utf-8")


POETRY_PYPROJECT = """\
[tool.poetry]
name = "myapp"

[tool.poetry.dependencies]
python = "^3.9"
fastapi = "^0.110"
"""


class TestDetectPythonVersion:
    def test_pyproject_wins_over_runtime_txt(self, tmp_path):
        _write(tmp_path, "pyproject.toml", POETRY_PYPROJECT)
        _write(tmp_path, "runtime.txt", "python-3.11.4\n")
        assert detect_python_version(tmp_path) == "3.9"

    def test_runtime_txt_when_no_pyproject(self, tmp_path):
        _write(tmp_path, "runtime.txt", "python-3.10.12\n")
        assert detect_python_version(tmp_path) == "3.10"

    def test_runtime_txt_when_pyproject_has_no_python_binding(self, tmp_path):
        _write(tmp_path, "pyproject.toml", '[project]\nname = "x"\n')
        _write(tmp_path, "runtime.txt", "python-3.8.18")
        assert detect_python_version(tmp_path) == "3.8"

    def test_default_when_no_version_files(self, tmp_path):
        assert detect_python_version(tmp_path) == DEFAULT_PYTHON_VERSION == "3.11"

    def test_default_when_runtime_txt_is_unrecognised(self, tmp_path):
        _write(tmp_path, "runtime.txt", "pypy3.9")
        assert detect_python_version(tmp_path) == "3.11"

    def test_unreadable_pyproject_falls_through_to_runtime_txt(self, tmp_path):
        (tmp_path / "pyproject.toml").write_bytes(b"\xff\xfe\x00python")
        _write(tmp_path, "runtime.txt", "python-3.12.1")
        assert detect_python_version(tmp_path) == "3.12"


class TestExtractPyprojectPython:
    @pytest.mark.parametrize(
        "content, expected",
        [
            ('python = "^3.9"', "3.9"),
            ('python = ">=3.10,<4.0"', "3.10"),
            ('python = "~3.11.4"', "3.11"),
            ('requires-python = ">=3.12"', "3.12"),
            ('python="3.8"', "3.8"),
            ('python = "*"', None),
            ('name = "python-thing"', None),
        ],
    )
    def test_values(self, content, expected):
        assert extract_pyproject_python(content) == expected


class TestExtractRuntimePython:
    def test_major_minor_pair(self):
        assert extract_runtime_python("python-3.11.4") == "3.11"

    def test_no_prefix(self):
        assert extract_runtime_python("3.11.4") is None
