import pytest

CONFIG_ENV_VARS = ("DT_INPUT_TIMEZONE", "DT_OUTPUT_TIMEZONE", "DT_FORMAT")


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the developer's environment out of the tests.

    Configuration is read from DT_* environment variables and from a
    datetime_transformer.toml in the working directory, so both are cleared
    for every test.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
