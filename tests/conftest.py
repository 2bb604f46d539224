import io

import pytest


class Capture(io.StringIO):
    """StringIO that records each write call."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[str] = []

    def write(self, s: str) -> int:
        self.writes.append(s)
        return super().write(s)

    @property
    def lines(self) -> list[str]:
        return self.getvalue().splitlines()


@pytest.fixture
def stdout() -> Capture:
    return Capture()


@pytest.fixture
def stderr() -> Capture:
    return Capture()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test in its own directory so log folders never leak."""
    monkeypatch.chdir(tmp_path)
    for key in ("CONSOLE_ENABLED", "CONSOLE_LEVEL", "FILE_ENABLED", "FILE_LEVEL", "FILE_PATH", "REPLICANTS"):
        monkeypatch.delenv(f"NODECG_LOG_{key}", raising=False)
    yield tmp_path

