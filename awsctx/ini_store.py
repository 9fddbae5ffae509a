# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#                          ᚱᚢᚾᛖᛊᛏᛟᚾᛖ • THE RUNESTONE
#                      What Is Carved Stays Carved
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#
#   Load and save a single INI file. Documents are always read, modified
#   in memory and written back whole, so sections we never touch survive.
#
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Union

from awsctx.errors import ConfigFileError, ConfigFileNotFoundError

logger = logging.getLogger(__name__)

Document = configparser.RawConfigParser


def new_document() -> Document:
    """
    Create an empty INI document.
    
    Keys keep their original case and values are never interpolated,
    so secrets containing '%' are stored verbatim.
    """
    document = configparser.RawConfigParser()
    document.optionxform = str
    return document


class IniStore:
    """
    Read/write access to one INI file on disk.
    
    Example:
        store = IniStore('~/.aws/config')
        document = store.load_or_empty()
        document['default']['region'] = 'eu-west-1'
        store.save(document)
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path).expanduser()

    def __repr__(self) -> str:
        return f"IniStore({str(self.path)!r})"

    def load(self) -> Document:
        """
        Parse the file into a document.
        
        Raises:
            ConfigFileNotFoundError: If the file does not exist
            ConfigFileError: If the file cannot be read or parsed
        """
        document = new_document()
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                document.read_file(f, source=str(self.path))
        except FileNotFoundError as e:
            raise ConfigFileNotFoundError(self.path) from e
        except OSError as e:
            raise ConfigFileError(f"cannot read {self.path}: {e.strerror or e}", self.path) from e
        except (configparser.Error, UnicodeDecodeError) as e:
            raise ConfigFileError(f"cannot parse {self.path}: {e}", self.path) from e

        logger.debug("Loaded %s (%d sections)", self.path, len(document.sections()))
        return document

    def load_or_empty(self) -> Document:
        """Like load(), but an absent file yields an empty document."""
        try:
            return self.load()
        except ConfigFileNotFoundError:
            logger.debug("%s does not exist, starting from an empty document", self.path)
            return new_document()

    def save(self, document: Document) -> None:
        """
        Write the whole document to the file, replacing its content.
        
        Raises:
            ConfigFileError: On any I/O failure
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                document.write(f)
        except OSError as e:
            raise ConfigFileError(f"cannot write {self.path}: {e.strerror or e}", self.path) from e

        logger.info("Saved %s", self.path)

    def create_empty(self) -> None:
        """Create the file (and its directory) with no content."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(exist_ok=False)
        except OSError as e:
            raise ConfigFileError(f"cannot create {self.path}: {e.strerror or e}", self.path) from e

        logger.info("Created empty file %s", self.path)
