import pytest


class FixedSource:
    """Random source stub that always returns the same value."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randrange(self, start: int, stop: int) -> int:
        self.calls.append((start, stop))
        return self.value


@pytest.fixture
def fixed_source():
    """Factory for `FixedSource` stubs."""
    return FixedSource


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no RUT_LIB_* variables set."""
    for name in (
        "RUT_LIB_DEFAULT_FORMAT",
        "RUT_LIB_RANDOM_SEED",
        "RUT_LIB_GENERATE_COUNT",
        "RUT_LIB_SHOW_BANNER",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
