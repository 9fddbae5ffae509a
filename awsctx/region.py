"""
Region resolution for a profile.

Only the shared config file is read and written here; the credentials
file is never touched.
"""

from __future__ import annotations

import logging

from awsctx.aws_utils import AwsFiles, REGION_KEY, config_section_name, find_option
from awsctx.errors import ValidationError
from awsctx.ini_store import IniStore
from awsctx.prompt import UI

logger = logging.getLogger(__name__)


class RegionResolver:
    """Prompt for a profile's region and persist the answer."""

    def __init__(self, files: AwsFiles, ui: UI) -> None:
        self.files = files
        self.ui = ui
        self.store = IniStore(files.config)

    def resolve(self, suggested_region: str, profile: str) -> str:
        """
        Ask for the region to use with profile and save it in the config file.
        
        A region already configured for the profile replaces suggested_region
        as the value offered to the user. The section is created if missing
        ('default' for the default profile, 'profile <name>' otherwise).
        
        Args:
            suggested_region: Fallback suggestion, may be empty
            profile: Profile name as selected by the user
        
        Returns:
            The region entered by the user
        
        Raises:
            ValidationError: If the entered region is empty
            ConfigFileError: If the config file cannot be parsed or written
        """
        document = self.store.load_or_empty()
        section = config_section_name(profile)

        if not document.has_section(section):
            logger.debug("Creating section [%s] in %s", section, self.files.config)
            document.add_section(section)

        key = find_option(document, section, REGION_KEY) or REGION_KEY
        suggestion = document.get(section, key, fallback=suggested_region or '')

        region = self.ui.input("Region", suggestion)
        if not region:
            raise ValidationError("region cannot be empty")

        document.set(section, key, region)
        self.store.save(document)
        logger.info("Region %s saved for profile %s", region, profile)
        return region
