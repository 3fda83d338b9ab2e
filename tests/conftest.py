from __future__ import annotations

import io

import pytest
from rich.console import Console

from creational_demos.core.domain.language import Language
from creational_demos.core.output import DemoOutput


class RecordingOutput(DemoOutput):
    """DemoOutput writing to an in-memory buffer."""

    def __init__(self, language: Language = Language.ENGLISH) -> None:
        super().__init__(
            console=Console(file=io.StringIO(), width=200, color_system=None),
            language=language,
        )

    @property
    def lines(self) -> list[str]:
        return self.console.file.getvalue().splitlines()


@pytest.fixture
def output() -> RecordingOutput:
    return RecordingOutput()


@pytest.fixture
def output_pt() -> RecordingOutput:
    return RecordingOutput(Language.PORTUGUESE)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    # Keep a developer's .env / env vars out of the tests.
    monkeypatch.chdir(tmp_path)
    for key in ("DEFAULT_LANGUAGE", "SHOW_BANNER", "LOG_LEVEL"):
        monkeypatch.delenv(f"CREATIONAL_DEMOS_{key}", raising=False)
