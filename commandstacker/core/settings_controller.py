import configparser
import logging
import os

from commandstacker.core.stacker import DEFAULT_CAPACITY, CommandStackerOptions

logger = logging.getLogger(__name__)

SETTINGS_FILE = 'settings.ini'


class SettingsController:
    """Manages undo history settings persistence."""

    DEFAULT_UNDO_SETTINGS = {
        "capacity": DEFAULT_CAPACITY,
    }

    def __init__(self, path: str = SETTINGS_FILE):
        self.path = path
        self.config = configparser.ConfigParser(interpolation=None)
        if os.path.exists(path):
            self.config.read(path)
        if not self.config.has_section('Undo'):
            self.config.add_section('Undo')
        self.capacity = self._get_undo_int('capacity', self.DEFAULT_UNDO_SETTINGS["capacity"])
        self._sync_undo_settings_to_config()

    def options(self) -> CommandStackerOptions:
        return CommandStackerOptions(capacity=self.capacity)

    def save_settings(self):
        """Persist settings to disk."""
        self._sync_undo_settings_to_config()
        with open(self.path, 'w') as configfile:
            self.config.write(configfile)

    def _get_undo_int(self, option, fallback):
        try:
            value = self.config.getint('Undo', option)
        except configparser.NoOptionError:
            return fallback
        except ValueError:
            logger.warning(
                "Invalid %s %r in %s, using %d",
                option, self.config.get('Undo', option), self.path, fallback,
            )
            return fallback
        if value <= 0:
            logger.warning("Non-positive %s %d in %s, using %d", option, value, self.path, fallback)
            return fallback
        return value

    def _sync_undo_settings_to_config(self):
        self.config.set('Undo', 'capacity', str(self.capacity))
