import pytest

_SETTINGS_VARS = ('SHADER_SWATCH_POLICY', 'SHADER_SWATCH_SWATCH_SIZE')


@pytest.fixture(autouse=True)
def _clean_swatch_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SHADER_SWATCH_* settings out of the tests.

    setenv first so monkeypatch also undoes whatever load_env() writes.
    """
    for name in _SETTINGS_VARS:
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
