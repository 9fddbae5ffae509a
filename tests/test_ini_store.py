import pytest

from awsctx.errors import ConfigFileError, ConfigFileNotFoundError
from awsctx.ini_store import IniStore, new_document


def test_load_missing_file_is_distinguishable(tmp_path):
    store = IniStore(tmp_path / 'nope')

    with pytest.raises(ConfigFileNotFoundError) as exc:
        store.load()

    assert isinstance(exc.value, ConfigFileError)
    assert exc.value.path == tmp_path / 'nope'


def test_load_or_empty_returns_empty_document(tmp_path):
    document = IniStore(tmp_path / 'nope').load_or_empty()

    assert document.sections() == []
    assert not (tmp_path / 'nope').exists()


def test_unparsable_file_is_not_treated_as_missing(tmp_path, write_file):
    path = write_file(tmp_path / 'config', "region = us-east-1\n")
    store = IniStore(path)

    with pytest.raises(ConfigFileError) as exc:
        store.load()
    assert not isinstance(exc.value, ConfigFileNotFoundError)

    with pytest.raises(ConfigFileError):
        store.load_or_empty()


def test_duplicate_sections_fail_to_parse(tmp_path, write_file):
    path = write_file(tmp_path / 'credentials', "[a]\nx = 1\n[a]\ny = 2\n")

    with pytest.raises(ConfigFileError, match="cannot parse"):
        IniStore(path).load()


def test_save_keeps_untouched_sections_keys_and_values(tmp_path, write_file):
    path = write_file(
        tmp_path / 'credentials',
        "[first]\nAws_Access_Key_Id = AKIA1\nsecret = 50%off\n\n[second]\nkey = value\n",
    )
    store = IniStore(path)

    document = store.load()
    document.add_section('third')
    document.set('third', 'key', 'new')
    store.save(document)

    reloaded = store.load()
    assert reloaded.sections() == ['first', 'second', 'third']
    assert dict(reloaded['first']) == {'Aws_Access_Key_Id': 'AKIA1', 'secret': '50%off'}
    assert dict(reloaded['second']) == {'key': 'value'}
    assert reloaded.get('third', 'key') == 'new'


def test_save_creates_missing_directory(tmp_path):
    store = IniStore(tmp_path / 'home' / '.aws' / 'config')
    document = new_document()
    document.add_section('default')
    document.set('default', 'region', 'us-west-2')

    store.save(document)

    assert store.load().get('default', 'region') == 'us-west-2'


def test_save_failure_surfaces_os_error(tmp_path, write_file):
    blocker = write_file(tmp_path / 'blocker', "")
    store = IniStore(blocker / 'config')

    with pytest.raises(ConfigFileError, match="cannot write") as exc:
        store.save(new_document())

    assert isinstance(exc.value.__cause__, OSError)


def test_create_empty(tmp_path):
    store = IniStore(tmp_path / '.aws' / 'credentials')

    store.create_empty()

    assert store.path.is_file()
    assert store.path.read_text() == ''
    assert store.load().sections() == []


def test_create_empty_refuses_existing_file(tmp_path, write_file):
    path = write_file(tmp_path / 'credentials', "[a]\nk = v\n")

    with pytest.raises(ConfigFileError):
        IniStore(path).create_empty()

    assert path.read_text() == "[a]\nk = v\n"


def test_path_expands_user(monkeypatch, tmp_path):
    monkeypatch.setenv('HOME', str(tmp_path))

    assert IniStore('~/.aws/config').path == tmp_path / '.aws' / 'config'


def test_commented_file_keeps_sections_and_keys(tmp_path, write_file):
    path = write_file(
        tmp_path / 'config',
        "# my notes\n[profile prod]\n# keep me\nregion = eu-west-1\n; aside\n[default]\noutput = json\n",
    )
    store = IniStore(path)

    store.save(store.load())

    reloaded = store.load()
    assert reloaded.sections() == ['profile prod', 'default']
    assert dict(reloaded['profile prod']) == {'region': 'eu-west-1'}
    assert dict(reloaded['default']) == {'output': 'json'}
    assert '#' not in path.read_text()
