"""Centralised resolution of the unihover user directory."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
import os
from pathlib import Path
from threading import RLock


__all__ = [
    "SETTINGS_FILENAME",
    "UnihoverUserDir",
    "configure_user_dir",
    "get_user_dir",
    "set_user_dir",
    "user_dir_context",
]

SETTINGS_FILENAME = "settings.yml"

_USER_DIR: UnihoverUserDir | None = None
_LOCK: RLock = RLock()


def _resolve_root(root: str | Path | None) -> tuple[Path, bool]:
    if root is not None:
        return Path(root).expanduser(), True
    env_root = os.environ.get("UNIHOVER_HOME")
    if env_root:
        return Path(env_root).expanduser(), True
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config).expanduser() / "unihover", False
    return Path.home() / ".unihover", False


@dataclass(slots=True)
class UnihoverUserDir:
    """Resolved user root plus helpers to locate files below it."""

    root: Path
    root_is_explicit: bool = False

    def data_path(self, *parts: str | Path, create: bool = True) -> Path:
        """Return a path under the user root, creating parent directories if needed."""
        target = self.root.joinpath(*parts)
        if create:
            target.parent.mkdir(parents=True, exist_ok=True)
        return target


def configure_user_dir(*, root: str | Path | None = None) -> UnihoverUserDir:
    """Replace the global user dir singleton with a freshly resolved instance."""
    user_root, root_was_explicit = _resolve_root(root)
    return set_user_dir(UnihoverUserDir(root=user_root, root_is_explicit=root_was_explicit))


def get_user_dir() -> UnihoverUserDir:
    """Return the lazily created user dir singleton.

    Implicit roots are re-resolved so that environment changes made after the
    first call are honoured.
    """
    global _USER_DIR
    with _LOCK:
        if _USER_DIR is None:
            _USER_DIR = configure_user_dir()
            return _USER_DIR
        if not _USER_DIR.root_is_explicit:
            current_root, root_was_explicit = _resolve_root(None)
            if _USER_DIR.root != current_root or root_was_explicit:
                _USER_DIR = UnihoverUserDir(root=current_root, root_is_explicit=root_was_explicit)
        return _USER_DIR


def set_user_dir(user_dir: UnihoverUserDir) -> UnihoverUserDir:
    """Replace the current user dir singleton and return it."""
    global _USER_DIR
    with _LOCK:
        _USER_DIR = user_dir
        return _USER_DIR


@contextmanager
def user_dir_context(*, root: str | Path | None = None) -> Iterator[UnihoverUserDir]:
    """Temporarily override the global user dir singleton."""
    global _USER_DIR
    with _LOCK:
        previous = _USER_DIR
    current = configure_user_dir(root=root)
    try:
        yield current
    finally:
        with _LOCK:
            _USER_DIR = previous
