# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#                              ᛒᛁᚠᚱᛟᛊᛏ • BIFRÖST
#                 The Bridge Between a Profile and a Region
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#
#   Resolve which profile and region a deployment context should use,
#   asking the user only for what was not given up front.
#
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Tuple

from awsctx.aws_utils import AwsFiles, DEFAULT_PROFILE, ProfileCatalog, profile_exists
from awsctx.credentials import CredentialWriter
from awsctx.errors import NotFoundError, ValidationError
from awsctx.prompt import UI, ConsolePrompt
from awsctx.region import RegionResolver

logger = logging.getLogger(__name__)

NEW_PROFILE_OPTION = 'new profile'


@dataclass
class ContextParams:
    """What the caller already knows about the context to create."""
    name: str = ''
    description: str = ''
    profile: Optional[str] = None
    region: Optional[str] = None


@dataclass
class EcsContext:
    """
    Context record handed to the context store.
    
    An empty profile means the default profile.
    """
    profile: str
    region: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ContextCreateHelper:
    """
    Drives profile and region selection for a new context.
    
    Example:
        helper = ContextCreateHelper()
        ctx, description = helper.create_context_data(
            ContextParams(name='staging', description='Staging cluster')
        )
    """

    def __init__(self, ui: Optional[UI] = None, files: Optional[AwsFiles] = None) -> None:
        self.ui = ui or ConsolePrompt()
        self.files = files or AwsFiles.from_environment()
        self.catalog = ProfileCatalog(self.files)
        self.credentials = CredentialWriter(self.files, self.ui)
        self.regions = RegionResolver(self.files, self.ui)

    def create_context_data(self, params: ContextParams) -> Tuple[EcsContext, str]:
        """
        Resolve profile and region, then build the context record.
        
        Args:
            params: Known profile/region/description; missing values are prompted for
        
        Returns:
            (context, description) where description reads "<description> (<region>)"
        
        Raises:
            NotFoundError: If params.profile is set but not configured
            ValidationError: If the user enters an empty name/region or short keys
            CanceledError: If the user interrupts a prompt
            AlreadyExistsError: If a new profile collides with stored credentials
            ConfigFileError: If a shared file cannot be parsed or written
        """
        profiles = self.catalog.discover()

        profile = params.profile
        if profile:
            if not profile_exists(profile, profiles):
                raise NotFoundError(profile)
            logger.info("Using profile %s", profile)
        else:
            profile = self.choose_profile(profiles)

        region = params.region
        if not region:
            region = self.choose_region('', profile)

        return self.create_context(profile, region, params.description)

    def choose_profile(self, profiles: List[str]) -> str:
        """Let the user pick an existing profile or create a new one."""
        options = [NEW_PROFILE_OPTION] + profiles
        selected = options[self.ui.select("Select AWS Profile", options)]
        if selected != NEW_PROFILE_OPTION:
            logger.info("Selected existing profile %s", selected)
            return selected

        suggestion = '' if DEFAULT_PROFILE in profiles else DEFAULT_PROFILE
        name = self.ui.input("profile name", suggestion)
        if not name:
            raise ValidationError("profile name cannot be empty")

        logger.info("Creating profile %s", name)
        self.credentials.create_profile(name)
        return name

    def choose_region(self, region: str, profile: str) -> str:
        return self.regions.resolve(region, profile)

    @staticmethod
    def create_context(profile: str, region: str, description: str) -> Tuple[EcsContext, str]:
        if profile == DEFAULT_PROFILE:
            profile = ''
        description = f"{description} ({region})".strip()
        return EcsContext(profile=profile, region=region), description
