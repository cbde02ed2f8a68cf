#!/usr/bin/env python3
"""
Core contact cleaner functionality
Owns the loaded contact list and runs the classification passes
"""

import configparser
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import colorlog
import pytz

from .contact_loader import parse_contacts_document, read_contacts_file
from .exceptions import ContactCleanerError, FormatError, LoadIOError
from .exporter import DEFAULT_SUFFIX, DisclaimerGate, write_export
from .models import Contact, ContactSummary
from .path_resolver import PathDependencyResolver
from .rule_engine import RuleEngine, build_contact
from .selection_state import SelectionState
from .utils import resolve_path


DEFAULT_CONFIG = """[Cleaner]
# Days without an advert after which repeaters and companions are
# suggested for removal (favorites are never removed by age)
stale_after_days = 10

# Number of public key characters that identify a repeater in out_path
prefix_length = 2

# Timezone used for "now" and for displaying last-heard times
# Leave empty to use the system timezone
timezone =

[Export]
# Directory for cleaned exports (relative to this config file)
output_dir = .

# Appended to the input file name (without .json)
suffix = _cleaned.json

# Ask for confirmation before the first export of a session
require_disclaimer = true

[Logging]
# Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL
log_level = INFO

# Enable colored console output
colored_output = true

# Log file (leave empty for console only)
log_file =
"""


class ContactCleaner:
    """Owned context for one cleaning session.

    Holds the configuration, the currently loaded contacts and their
    selection flags, and the export disclaimer state. Every operation runs
    to completion before the next one starts; nothing here is shared
    between threads.
    """

    def __init__(self, config_file: str = "config.ini"):
        self.config_file = config_file
        self.config = configparser.ConfigParser()
        self.load_config()

        # Relative paths in config are resolved from the config file's directory
        self.config_root = Path(config_file).resolve().parent

        self.setup_logging()

        self.timezone = self._load_timezone()
        self.rule_engine = RuleEngine(self)
        self.path_resolver = PathDependencyResolver(self)
        self.selection = SelectionState()

        self.disclaimer = DisclaimerGate(
            self.config.getboolean('Export', 'require_disclaimer', fallback=True)
        )
        self.original_file_name: Optional[str] = None
        self.status_message = ''

    def load_config(self) -> None:
        """Load configuration from file, writing the default one if missing."""
        if not Path(self.config_file).exists():
            self.create_default_config()
        self.config.read(self.config_file, encoding="utf-8")

    def create_default_config(self) -> None:
        path = Path(self.config_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DEFAULT_CONFIG, encoding="utf-8")

    def setup_logging(self) -> None:
        """Setup logging from the [Logging] section (console only when absent)."""
        if self.config.has_section('Logging'):
            log_level = getattr(logging, self.config.get('Logging', 'log_level', fallback='INFO').upper(), logging.INFO)
            colored_output = self.config.getboolean('Logging', 'colored_output', fallback=True)
            log_file = self.config.get('Logging', 'log_file', fallback='')
        else:
            log_level = logging.INFO
            colored_output = True
            log_file = ''

        if colored_output:
            formatter = colorlog.ColoredFormatter(
                '%(log_color)s%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
                log_colors={
                    'DEBUG': 'cyan',
                    'INFO': 'green',
                    'WARNING': 'yellow',
                    'ERROR': 'red',
                    'CRITICAL': 'red,bg_white',
                }
            )
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )

        self.logger = logging.getLogger('ContactCleaner')
        self.logger.setLevel(log_level)

        # Clear any existing handlers to prevent duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        log_file = log_file.strip() if log_file else ''
        if log_file:
            log_file = resolve_path(log_file, self.config_root)
            try:
                Path(log_file).parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_file)
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)
            except (OSError, PermissionError) as e:
                self.logger.warning(f"Could not open log file {log_file}: {e}. Using console logging only.")

        self.logger.propagate = False

    def _load_timezone(self):
        timezone_str = self.config.get('Cleaner', 'timezone', fallback='').strip()
        if not timezone_str:
            return None
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            self.logger.warning(f"Invalid timezone '{timezone_str}', using system timezone")
            return None

    def get_current_time(self) -> datetime:
        """Current time in the configured timezone (timezone-aware)."""
        if self.timezone is not None:
            return datetime.now(self.timezone)
        return datetime.now().astimezone()

    @property
    def contacts(self) -> List[Contact]:
        return self.selection.contacts

    def process_contacts(self, raw_contacts: List[Dict[str, Any]],
                         now: Optional[datetime] = None) -> List[Contact]:
        """Classify raw records and replace the loaded collection.

        Runs the rule engine on every contact, then the path dependency pass,
        then seeds the selection from the final recommendations.
        """
        if now is None:
            now = self.get_current_time()

        contacts = [
            self.rule_engine.apply(build_contact(raw, index, now))
            for index, raw in enumerate(raw_contacts)
        ]
        self.path_resolver.apply(contacts)
        self.selection.initialize(contacts)

        summary = self.selection.summary()
        self.logger.info(
            f"Classified {summary.total} contacts: {summary.keep} keep, {summary.remove} remove"
        )
        return contacts

    def load_text(self, text: str, file_name: Optional[str] = None,
                  now: Optional[datetime] = None) -> bool:
        """Parse and classify an export that has already been read.

        Returns:
            bool: True on success. On a FormatError the loaded contacts are cleared.
        """
        try:
            raw_contacts = parse_contacts_document(text)
        except FormatError as e:
            self.logger.error(f"Failed to parse contacts from {file_name or 'input'}: {e}")
            self.selection.clear()
            self.original_file_name = None
            self.status_message = e.user_message
            return False

        self.original_file_name = file_name
        self.process_contacts(raw_contacts, now)
        if file_name:
            self.status_message = f'Loaded {len(raw_contacts)} contacts from "{file_name}".'
        else:
            self.status_message = f'Loaded {len(raw_contacts)} contacts.'
        self.logger.info(self.status_message)
        return True

    async def load_file(self, path: Union[str, Path], now: Optional[datetime] = None) -> bool:
        """Read, parse and classify an export file.

        A read failure leaves the current state untouched; a parse failure
        clears it. Errors are reported through ``status_message``.
        """
        path = Path(path)
        try:
            text = await read_contacts_file(path)
        except LoadIOError as e:
            self.logger.error(str(e))
            self.status_message = e.user_message
            return False
        return self.load_text(text, path.name, now)

    def toggle(self, contact_id: int, value: bool) -> bool:
        changed = self.selection.toggle(contact_id, value)
        if not changed:
            self.logger.warning(f"Ignoring toggle for unknown contact id {contact_id}")
        return changed

    def set_all(self, value: bool) -> None:
        self.selection.set_all(value)
        self.logger.info(f"{'Selected' if value else 'Deselected'} all {len(self.selection)} contacts")

    def summary(self) -> ContactSummary:
        return self.selection.summary()

    def snapshot(self) -> List[Dict[str, Any]]:
        return self.selection.snapshot()

    def export(self, confirm: Callable[[str], bool],
               output_dir: Optional[Union[str, Path]] = None) -> Optional[Path]:
        """Write the selected contacts to a cleaned export file.

        Args:
            confirm: Disclaimer prompt; only called until it accepts once.
            output_dir: Overrides [Export] output_dir.

        Returns:
            Optional[Path]: Written file, or None when nothing was exported.
        """
        if not self.contacts:
            self.logger.info("No contacts loaded, nothing to export")
            return None

        if not self.disclaimer.check(confirm):
            self.logger.info("Export cancelled: disclaimer declined")
            return None

        if output_dir is None:
            output_dir = self.config.get('Export', 'output_dir', fallback='.')
        output_dir = resolve_path(output_dir, self.config_root)
        suffix = self.config.get('Export', 'suffix', fallback=DEFAULT_SUFFIX) or DEFAULT_SUFFIX

        kept = self.snapshot()
        try:
            output_path = write_export(kept, output_dir, self.original_file_name, suffix)
        except (OSError, ValueError) as e:
            self.logger.error(f"Failed to write export to {output_dir}: {e}")
            raise ContactCleanerError(f"Could not write export: {e}") from e

        self.logger.info(f"Exported {len(kept)} of {len(self.contacts)} contacts to {output_path}")
        return output_path
