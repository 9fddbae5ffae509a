from pathlib import Path

import pytest

from awsctx.aws_utils import AwsFiles
from awsctx.prompt import UI

# Answer that makes ScriptedUI.input() accept the offered suggestion.
ACCEPT = object()


class ScriptedUI(UI):
    """UI that replays canned answers and records every prompt."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls = []

    def _next(self, call):
        self.calls.append(call)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {call}")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def select(self, title, options):
        answer = self._next(('select', title, list(options)))
        return options.index(answer) if isinstance(answer, str) else answer

    def input(self, title, suggestion):
        answer = self._next(('input', title, suggestion))
        return suggestion if answer is ACCEPT else answer

    def password(self, title):
        return self._next(('password', title))

    def confirm(self, title, default):
        return self._next(('confirm', title, default))

    def titles(self):
        return [call[1] for call in self.calls]


@pytest.fixture(autouse=True)
def isolated_aws_env(monkeypatch, tmp_path):
    """Never let a test see the real ~/.aws files."""
    monkeypatch.setenv('AWS_SHARED_CREDENTIALS_FILE', str(tmp_path / 'env-aws' / 'credentials'))
    monkeypatch.setenv('AWS_CONFIG_FILE', str(tmp_path / 'env-aws' / 'config'))
    monkeypatch.delenv('AWS_PROFILE', raising=False)
    monkeypatch.delenv('AWS_DEFAULT_PROFILE', raising=False)


@pytest.fixture
def aws_dir(tmp_path) -> Path:
    return tmp_path / '.aws'


@pytest.fixture
def files(aws_dir) -> AwsFiles:
    return AwsFiles(credentials=aws_dir / 'credentials', config=aws_dir / 'config')


@pytest.fixture
def write_file():
    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        return path
    return _write


CREDENTIALS = """\
[default]
aws_access_key_id = AKIADEFAULT
aws_secret_access_key = default-secret

[Prod]
aws_access_key_id = AKIAPROD
aws_secret_access_key = prod%secret
aws_session_token = token-value

[dev]
aws_access_key_id = AKIADEV
aws_secret_access_key = dev-secret
"""

CONFIG = """\
[default]
region = us-east-1
output = json

[profile prod]
region = eu-west-1
cli_pager =

[profile staging]
region = eu-central-1
role_arn = arn:aws:iam::123456789012:role/Deployer
source_profile = default

[sso-session corp]
sso_start_url = https://corp.awsapps.com/start
sso_region = us-east-1

[services local]
s3 =
  endpoint_url = http://localhost:4566
"""


@pytest.fixture
def populated(files, write_file) -> AwsFiles:
    """Both shared files with a handful of profiles."""
    write_file(files.credentials, CREDENTIALS)
    write_file(files.config, CONFIG)
    return files
