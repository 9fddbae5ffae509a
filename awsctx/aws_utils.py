"""
AWS shared file utilities for awsctx

Locates ~/.aws/credentials and ~/.aws/config, translates between profile
names and config section names, and merges both files into one catalog.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Dict, Optional, Any

import botocore.session

from awsctx.errors import ConfigFileNotFoundError
from awsctx.ini_store import Document, IniStore

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = 'default'
PROFILE_PREFIX = 'profile '

ACCESS_KEY_ID = 'aws_access_key_id'
SECRET_ACCESS_KEY = 'aws_secret_access_key'
REGION_KEY = 'region'


@dataclass(frozen=True)
class AwsFiles:
    """Locations of the shared credentials and config files."""
    credentials: Path
    config: Path

    @classmethod
    def from_environment(
        cls,
        credentials_file: Optional[str] = None,
        config_file: Optional[str] = None,
        session: Optional[botocore.session.Session] = None,
    ) -> AwsFiles:
        """
        Resolve file locations the way the AWS SDKs do.
        
        Explicit arguments win; otherwise botocore's session variables are
        used, which honour AWS_SHARED_CREDENTIALS_FILE and AWS_CONFIG_FILE
        before falling back to ~/.aws/credentials and ~/.aws/config.
        
        Args:
            credentials_file: Override for the credentials file path
            config_file: Override for the config file path
            session: botocore session to read defaults from (mainly for tests)
        """
        if credentials_file is None or config_file is None:
            session = session or botocore.session.get_session()
            credentials_file = credentials_file or session.get_config_variable('credentials_file')
            config_file = config_file or session.get_config_variable('config_file')

        files = cls(
            credentials=Path(os.path.expanduser(credentials_file)),
            config=Path(os.path.expanduser(config_file)),
        )
        logger.debug("Using credentials=%s config=%s", files.credentials, files.config)
        return files


def config_section_name(profile: str) -> str:
    """
    Section name holding a profile's settings in the config file.
    
    Example:
        config_section_name('default')  -> 'default'
        config_section_name('prod')     -> 'profile prod'
    """
    if profile == DEFAULT_PROFILE:
        return DEFAULT_PROFILE
    return f"{PROFILE_PREFIX}{profile}"


def profile_from_config_section(section: str) -> Optional[str]:
    """
    Inverse of config_section_name().
    
    Returns None for sections that do not describe a profile
    (e.g. 'sso-session foo' or 'services bar').
    """
    if section.startswith(PROFILE_PREFIX):
        return section[len(PROFILE_PREFIX):]
    if section == DEFAULT_PROFILE:
        return DEFAULT_PROFILE
    return None


def find_option(document: Document, section: str, key: str) -> Optional[str]:
    """
    Name under which key is stored in section, ignoring case.
    
    Documents keep the case keys were written with, while the AWS SDKs
    read them case-insensitively ("AWS_ACCESS_KEY_ID" is "aws_access_key_id").
    Returns None when the section has no such key.
    """
    for option in document.options(section):
        if option.lower() == key:
            return option
    return None


def credentials_profiles(document: Document) -> List[str]:
    """Profiles in a credentials document - every section, verbatim."""
    return list(document.sections())


def config_profiles(document: Document) -> List[str]:
    """Profiles in a config document - only 'default' and 'profile X' sections."""
    profiles = []
    for section in document.sections():
        name = profile_from_config_section(section)
        if name is not None:
            profiles.append(name)
    return profiles


class ProfileCatalog:
    """
    Merged, de-duplicated view of the profiles in both shared files.
    
    Names are folded to lower case before de-duplication, so 'Prod' in the
    credentials file and 'profile prod' in the config file count once.
    """

    def __init__(self, files: AwsFiles) -> None:
        self.files = files

    def discover(self) -> List[str]:
        """
        Return every known profile name, lower-cased, in first-seen order.
        
        A missing file contributes nothing. A file that exists but cannot be
        parsed raises ConfigFileError.
        """
        sources = (
            (self.files.credentials, credentials_profiles),
            (self.files.config, config_profiles),
        )

        profiles: List[str] = []
        for path, extract in sources:
            try:
                document = IniStore(path).load()
            except ConfigFileNotFoundError:
                logger.debug("Skipping %s: file does not exist", path)
                continue
            for name in extract(document):
                name = name.lower()
                if name not in profiles:
                    profiles.append(name)

        logger.info("Discovered %d profile(s)", len(profiles))
        return profiles


def get_aws_profiles(files: AwsFiles) -> List[Dict[str, Any]]:
    """
    Get the catalog with per-profile details for display.
    
    Returns:
        List of dicts: [{'name': 'default', 'region': 'us-east-1', 'credentials': True}, ...]
    """
    credentials = IniStore(files.credentials).load_or_empty()
    config = IniStore(files.config).load_or_empty()

    stored = {
        section.lower()
        for section in credentials.sections()
        if find_option(credentials, section, ACCESS_KEY_ID) is not None
    }
    regions = {}
    for section in config.sections():
        name = profile_from_config_section(section)
        if name is None:
            continue
        key = find_option(config, section, REGION_KEY)
        if key is not None:
            regions.setdefault(name.lower(), config.get(section, key))

    return [
        {'name': name, 'region': regions.get(name), 'credentials': name in stored}
        for name in ProfileCatalog(files).discover()
    ]


def profile_exists(profile_name: str, profiles: List[str]) -> bool:
    """
    Check whether an explicitly requested profile may be used.
    
    'default' is always accepted, even when no file mentions it, since the
    SDK falls back to environment variables and instance roles for it.
    """
    return profile_name == DEFAULT_PROFILE or profile_name in profiles
