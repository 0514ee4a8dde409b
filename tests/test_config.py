from __future__ import annotations

from pathlib import Path

import pytest

from htmlprint.config import load_options, options_from_mapping
from htmlprint.errors import ConfigError
from htmlprint.models import PrintOptions


def test_missing_file_means_defaults(tmp_path: Path) -> None:
    assert load_options(tmp_path / "htmlprint.yaml", environ={}) == PrintOptions()


def test_yaml_file_is_loaded(tmp_path: Path) -> None:
    path = tmp_path / "htmlprint.yaml"
    path.write_text("print_width: 100\nuse_tabs: true\n", encoding="utf-8")

    options = load_options(path, environ={})

    assert options.print_width == 100
    assert options.use_tabs is True
    assert options.tab_width == 2


def test_environment_overrides_file(tmp_path: Path) -> None:
    path = tmp_path / "htmlprint.yaml"
    path.write_text("print_width: 100\ntab_width: 4\n", encoding="utf-8")

    options = load_options(
        path,
        environ={"HTMLPRINT_PRINT_WIDTH": "40", "HTMLPRINT_USE_TABS": "yes"},
    )

    assert (options.print_width, options.tab_width, options.use_tabs) == (40, 4, True)


def test_process_environment_is_used_by_default(monkeypatch) -> None:
    monkeypatch.setenv("HTMLPRINT_TAB_WIDTH", "8")
    monkeypatch.delenv("HTMLPRINT_PRINT_WIDTH", raising=False)
    monkeypatch.delenv("HTMLPRINT_USE_TABS", raising=False)

    assert options_from_mapping(None).tab_width == 8


@pytest.mark.parametrize(
    "content",
    [
        "print_width: [\n",
        "- just\n- a list\n",
        "print_width: 0\n",
        "unknown_option: 1\n",
    ],
)
def test_invalid_files_raise_config_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "htmlprint.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_options(path, environ={})


def test_bad_environment_value() -> None:
    with pytest.raises(ConfigError):
        options_from_mapping({}, environ={"HTMLPRINT_PRINT_WIDTH": "wide"})
