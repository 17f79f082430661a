import typing as t

import pytest
import structlog


class RecordingNotifier:
    """Notifier fake keeping every (level, message) pair."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def info(self, msg: str) -> None:
        self.records.append(("info", msg))

    def warn(self, msg: str) -> None:
        self.records.append(("warn", msg))

    @property
    def levels(self) -> list[str]:
        return [level for level, _ in self.records]


@pytest.fixture(autouse=True)
def clean_node_env(monkeypatch):
    """Tests start without an ambient environment name."""
    monkeypatch.delenv("NODE_ENV", raising=False)
    yield


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def env_dir(tmp_path) -> t.Callable[..., str]:
    """Create the given (empty) files in a temp directory and return its path."""

    def _make(*names: str) -> str:
        for name in names:
            (tmp_path / name).write_text("KEY=value\n", encoding="utf-8")
        return str(tmp_path)

    return _make


@pytest.fixture
def reset_logging():
    """Restore structlog defaults after a test reconfigures it."""
    yield
    structlog.reset_defaults()
