from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from unihover.core.config import FontPreference, HoverConfig
from unihover.core.exceptions import ConfigurationError, PreferenceError
from unihover.core.preferences import (
    FONT_CHOICES,
    FontPreferenceStore,
    InMemoryFontStore,
    SettingsFileStore,
    resolve_font_choice,
)
from unihover.core.user_dir import SETTINGS_FILENAME, user_dir_context


def test_font_choices_are_fixed() -> None:
    assert FONT_CHOICES[0] == "Arial Unicode MS"
    assert FONT_CHOICES[-1] == "Courier New"
    assert len(FONT_CHOICES) == 10


def test_in_memory_store_returns_last_set_family() -> None:
    store = InMemoryFontStore(HoverConfig(font_size=30))
    assert store.get() == FontPreference(family="Arial Unicode MS", size=30)
    store.set("Segoe UI Symbol")
    assert store.get() == FontPreference(family="Segoe UI Symbol", size=30)
    store.set("Arial")
    assert store.get().family == "Arial"


def test_stores_satisfy_protocol(tmp_path: Path) -> None:
    assert isinstance(InMemoryFontStore(), FontPreferenceStore)
    assert isinstance(SettingsFileStore(tmp_path / "settings.yml"), FontPreferenceStore)


def test_store_rejects_blank_family() -> None:
    store = InMemoryFontStore()
    with pytest.raises(PreferenceError):
        store.set("   ")
    assert store.get().family == "Arial Unicode MS"


def test_settings_file_store_defaults_without_file(tmp_path: Path) -> None:
    store = SettingsFileStore(tmp_path / "settings.yml")
    assert store.get() == FontPreference()


def test_settings_file_store_persists_and_keeps_other_keys(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "settings.yml"
    path.parent.mkdir()
    path.write_text("enabled: false\nfontSize: 16\ntheme: dark\n", encoding="utf-8")

    store = SettingsFileStore(path)
    store.set("Apple Color Emoji")

    assert store.get() == FontPreference(family="Apple Color Emoji", size=16)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert data == {
        "enabled": False,
        "fontSize": 16,
        "theme": "dark",
        "fontFamily": "Apple Color Emoji",
    }
    assert SettingsFileStore(path).config().enabled is False


def test_settings_file_store_replaces_snake_case_family(tmp_path: Path) -> None:
    path = tmp_path / "settings.yml"
    path.write_text("font_family: Arial\n", encoding="utf-8")
    store = SettingsFileStore(path)
    store.set("Courier New")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert data == {"fontFamily": "Courier New"}
    assert store.get().family == "Courier New"


def test_settings_file_store_defaults_to_user_dir(tmp_path: Path) -> None:
    with user_dir_context(root=tmp_path / "home") as user_dir:
        store = SettingsFileStore()
        store.set("Arial")
        assert store.path == user_dir.root / SETTINGS_FILENAME
        assert store.path.exists()


def test_settings_file_store_reports_write_failures(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = SettingsFileStore(blocker / "settings.yml")
    with pytest.raises(ConfigurationError):
        store.set("Arial")


@pytest.mark.parametrize(
    "content",
    [b"enabled: false\nfontSize: [oops\n", b"enabled: false\nfontFamily: \xff\n"],
    ids=["invalid-yaml", "undecodable"],
)
def test_settings_file_store_keeps_unparsable_file(tmp_path: Path, content: bytes) -> None:
    path = tmp_path / "settings.yml"
    path.write_bytes(content)
    store = SettingsFileStore(path)

    with pytest.raises(ConfigurationError):
        store.set("Arial")

    assert path.read_bytes() == content
    assert store.get() == FontPreference()


@pytest.mark.parametrize(
    ("entry", "expected"),
    [
        ("1", "Arial Unicode MS"),
        ("10", "Courier New"),
        ("noto color emoji", "Noto Color Emoji"),
        ("  Arial  ", "Arial"),
    ],
)
def test_resolve_font_choice(entry: str, expected: str) -> None:
    assert resolve_font_choice(entry) == expected


@pytest.mark.parametrize("entry", ["0", "11", "Comic Sans MS", ""])
def test_resolve_font_choice_rejects_unknown_entries(entry: str) -> None:
    with pytest.raises(PreferenceError):
        resolve_font_choice(entry)
