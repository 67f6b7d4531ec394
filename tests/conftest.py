"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from teapath import Path
from teapath.config import Config


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point HOME at a scratch directory and drop cached configuration."""

    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("TEA_PREFIX", raising=False)
    Config.reset()
    yield None
    Config.reset()


@pytest.fixture
def root(tmp_path) -> Path:
    """The pytest ``tmp_path`` as a teapath ``Path``."""

    return Path(tmp_path)
