"""
Shared test fixtures and configuration.
"""

import logging
import re
import sys
import textwrap
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _restore_process_state(monkeypatch: pytest.MonkeyPatch):
    """Undo what the CLI does to the process: sys.path and root logging."""
    monkeypatch.setattr(sys, "path", list(sys.path))
    root = logging.getLogger()
    level = root.level
    yield
    # setup_logging() installs plain Stream/File handlers; pytest's own are subclasses
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Chdir into an empty directory so no equatable.yml is found."""
    isolated = tmp_path / "isolated"
    isolated.mkdir()
    monkeypatch.chdir(isolated)
    return isolated


@pytest.fixture
def sample_module(tmp_path: Path):
    """Write an importable module of sample types; yield (name, directory)."""
    name = "eqgen_" + re.sub(r"\W", "_", tmp_path.name)
    source = textwrap.dedent("""\
        from dataclasses import dataclass


        @dataclass
        class Point:
            x: int
            y: int


        class Outer:
            @dataclass
            class Person:
                first_name: str
                last_name: str


        origin = Point(x=0, y=0)
    """)
    (tmp_path / f"{name}.py").write_text(source)
    yield name, tmp_path
    sys.modules.pop(name, None)


@pytest.fixture
def broken_module(tmp_path: Path):
    """Write a module whose body raises; yield (name, directory)."""
    name = "eqgen_broken_" + re.sub(r"\W", "_", tmp_path.name)
    (tmp_path / f"{name}.py").write_text("raise RuntimeError('boom')\n")
    yield name, tmp_path
    sys.modules.pop(name, None)
