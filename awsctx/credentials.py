# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#                            ᛞᚱᚨᚢᛈᚾᛁᚱ • DRAUPNIR
#                    The Ring That Is Never Forged Twice
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#
#   Store static access keys for a new profile in the shared credentials
#   file. Saving is two-phase: probe for existing credentials first, then
#   write. A profile that already has keys is refused, never overwritten.
#
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

from __future__ import annotations

import configparser
import logging
from typing import Optional, Tuple

from botocore.configloader import raw_config_parse
from botocore.credentials import SharedCredentialProvider
from botocore.exceptions import ConfigNotFound, ConfigParseError, PartialCredentialsError

from awsctx.aws_utils import AwsFiles, ACCESS_KEY_ID, SECRET_ACCESS_KEY
from awsctx.errors import (
    AlreadyExistsError,
    ConfigFileError,
    ConfigFileNotFoundError,
    ValidationError,
)
from awsctx.ini_store import IniStore
from awsctx.prompt import UI

logger = logging.getLogger(__name__)

MIN_KEY_LENGTH = 4


def _parse_credentials_file(path: str) -> dict:
    """
    botocore's ini parser, except that a missing file is reported
    instead of being treated as 'no credentials'.
    """
    try:
        return raw_config_parse(path)
    except ConfigNotFound as e:
        raise ConfigFileNotFoundError(path) from e
    except ConfigParseError as e:
        raise ConfigFileError(f"cannot parse {path}: {e}", path) from e


class CredentialWriter:
    """
    Ask for and persist credentials of a newly created profile.
    
    Example:
        writer = CredentialWriter(files, ui)
        writer.create_profile('staging')
    """

    def __init__(self, files: AwsFiles, ui: UI) -> None:
        self.files = files
        self.ui = ui
        self.store = IniStore(files.credentials)

    def create_profile(self, profile: str) -> None:
        """Ask for keys and, if the user provides them, save them."""
        keys = self.ask()
        if keys is None:
            logger.info("No credentials entered for profile %s", profile)
            return
        access_key_id, secret_access_key = keys
        self.save(profile, access_key_id, secret_access_key)

    def ask(self) -> Optional[Tuple[str, str]]:
        """
        Prompt for an access key pair.
        
        Returns:
            (access_key_id, secret_access_key), or None if the user declined
        
        Raises:
            ValidationError: If either key is shorter than MIN_KEY_LENGTH
        """
        if not self.ui.confirm("Enter AWS credentials", False):
            return None

        access_key_id = self.ui.input("AWS Access Key ID", "")
        secret_access_key = self.ui.password("Enter AWS Secret Access Key")
        if len(access_key_id) < MIN_KEY_LENGTH or len(secret_access_key) < MIN_KEY_LENGTH:
            raise ValidationError("AWS Access/Secret Access Key must have more than 3 characters")
        return access_key_id, secret_access_key

    def probe(self, profile: str) -> bool:
        """
        First phase: look for credentials already stored for profile.
        
        Returns:
            True if the credentials file does not exist yet, False otherwise
        
        Raises:
            AlreadyExistsError: If the profile already has stored keys
            ConfigFileError: If the file exists but cannot be parsed
        """
        provider = SharedCredentialProvider(
            creds_filename=str(self.files.credentials),
            profile_name=profile,
            ini_parser=_parse_credentials_file,
        )
        try:
            existing = provider.load()
        except ConfigFileNotFoundError:
            return True
        except PartialCredentialsError as e:
            logger.debug("Profile %s has partial credentials: %s", profile, e)
            raise AlreadyExistsError(profile, self.files.credentials) from e

        if existing is not None:
            raise AlreadyExistsError(profile, self.files.credentials)
        return False

    def save(self, profile: str, access_key_id: str, secret_access_key: str) -> None:
        """
        Add a section for profile holding both keys.
        
        Raises:
            AlreadyExistsError: If the profile already has a section
            ConfigFileError: If the file cannot be created, read or written
        """
        if self.probe(profile):
            self.store.create_empty()

        document = self.store.load()
        try:
            document.add_section(profile)
        except configparser.DuplicateSectionError as e:
            raise AlreadyExistsError(profile, self.files.credentials) from e
        except ValueError as e:
            raise ValidationError(f"invalid profile name {profile!r}: {e}") from e

        document.set(profile, ACCESS_KEY_ID, access_key_id)
        document.set(profile, SECRET_ACCESS_KEY, secret_access_key)
        self.store.save(document)
        logger.info("Stored credentials for profile %s in %s", profile, self.files.credentials)
