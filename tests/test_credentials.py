import pytest

from p2pb2b.errors import ConfigurationError
from p2pb2b.util.credentials import DEFAULT_CONFIG_PATH, Credentials, load_config, resolve_credentials


ENV = {"P2PB2B_API_KEY": "env-key", "P2PB2B_API_SECRET": "env-secret"}


def make_reader(files: dict):
    return lambda path: files.get(str(path))


def test_explicit_arguments_win(config_json):
    reader = make_reader({"custom.json": config_json, str(DEFAULT_CONFIG_PATH): config_json})

    creds = resolve_credentials("key", "secret", env=ENV, reader=reader)

    assert creds == Credentials("key", "secret")


def test_config_file_argument_beats_environment(config_json):
    reader = make_reader({"custom.json": config_json})

    creds = resolve_credentials("custom.json", env=ENV, reader=reader)

    assert creds == Credentials("file-key", "file-secret")


def test_environment_beats_default_config_file(config_json):
    reader = make_reader({str(DEFAULT_CONFIG_PATH): config_json})

    creds = resolve_credentials(env=ENV, reader=reader)

    assert creds == Credentials("env-key", "env-secret")


@pytest.mark.parametrize("env", [
    {},
    {"P2PB2B_API_KEY": "env-key"},
    {"P2PB2B_API_SECRET": "env-secret"},
    {"P2PB2B_API_KEY": "", "P2PB2B_API_SECRET": "env-secret"},
])
def test_default_config_file_when_environment_incomplete(env, config_json):
    reader = make_reader({str(DEFAULT_CONFIG_PATH): config_json})

    creds = resolve_credentials(env=env, reader=reader)

    assert creds == Credentials("file-key", "file-secret")


def test_nothing_configured_resolves_empty():
    creds = resolve_credentials(env={}, reader=make_reader({}))

    assert creds == Credentials("", "")
    assert not creds.complete


def test_too_many_arguments():
    with pytest.raises(ConfigurationError):
        resolve_credentials("a", "b", "c", env={}, reader=make_reader({}))


@pytest.mark.parametrize("contents, expected", [
    ('{"api-key": "k"}', Credentials("k", "")),
    ("{}", Credentials("", "")),
    ("not json", Credentials("", "")),
    ('["api-key"]', Credentials("", "")),
])
def test_load_config_tolerates_partial_files(contents, expected):
    assert load_config("cfg.json", make_reader({"cfg.json": contents})) == expected


def test_load_config_reads_real_file(tmp_path, config_json):
    path = tmp_path / "config.json"
    path.write_text(config_json)

    assert resolve_credentials(str(path), env={}) == Credentials("file-key", "file-secret")


def test_load_config_missing_real_file(tmp_path):
    assert resolve_credentials(str(tmp_path / "nope.json"), env={}) == Credentials()


def test_repr_hides_secret():
    assert "hunter2" not in repr(Credentials("key", "hunter2"))


def test_config_path_is_a_directory(tmp_path):
    assert resolve_credentials(str(tmp_path), env={}) == Credentials()


def test_config_file_not_utf8(tmp_path):
    path = tmp_path / "config.json"
    path.write_bytes(b'{"api-key": "\xff\xfe"}')

    assert resolve_credentials(str(path), env={}) == Credentials()


def test_config_file_unreadable():
    def reader(path):
        raise PermissionError(13, "Permission denied", path)

    assert load_config("cfg.json", reader) == Credentials()
