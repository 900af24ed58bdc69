"""
Config Store
============
Process-wide holder of the current MentionConfig snapshot.

Snapshot semantics:
    - current() returns an immutable MentionConfig; callers keep it for the
      whole request and never observe a half-applied update.
    - update() builds a NEW snapshot and swaps the reference.  Writers are
      serialized by a lock; readers never lock.
    - A logLevel change is applied to the logging tree immediately.

Setting keys (as sent by the editor host):
    prefixString, suffixString, quickFixPrompt, logLevel
"""
import logging
import threading
from dataclasses import replace
from typing import Optional

from cliagent_mention.core.config import default_mention_config
from cliagent_mention.models.mention_config import MentionConfig
from cliagent_mention.utils.logging_config import apply_log_level

logger = logging.getLogger(__name__)

# Setting key → MentionConfig field
SETTING_FIELDS: dict[str, str] = {
    "prefixString":   "prefix",
    "suffixString":   "suffix",
    "quickFixPrompt": "quick_fix_prompt",
    "logLevel":       "log_level",
}


class ConfigStore:
    """
    Holds the live MentionConfig snapshot.

    Usage:
        store = ConfigStore(MentionConfig())
        config = store.current()
        store.update({"prefixString": "#"})
    """

    def __init__(self, initial: Optional[MentionConfig] = None) -> None:
        self._config = initial or MentionConfig()
        self._write_lock = threading.Lock()

    def current(self) -> MentionConfig:
        """Most recently committed snapshot."""
        return self._config

    def update(self, settings: dict[str, str]) -> MentionConfig:
        """
        Commit a new snapshot with the given settings changed.

        Parameters
        ----------
        settings : dict[str, str]
            Setting key → new value.  Keys outside SETTING_FIELDS and None
            values are ignored.

        Returns
        -------
        MentionConfig
            The newly committed snapshot.
        """
        changes = {
            SETTING_FIELDS[key]: value
            for key, value in settings.items()
            if key in SETTING_FIELDS and value is not None
        }
        unknown = sorted(key for key in settings if key not in SETTING_FIELDS)
        if unknown:
            logger.warning("Ignoring unknown settings: %s", unknown)

        with self._write_lock:
            previous = self._config
            updated = replace(previous, **changes)
            self._config = updated

        if updated.prefix != previous.prefix:
            logger.info("Prefix string updated to: %s", updated.prefix)
        if updated.suffix != previous.suffix:
            logger.info("Suffix string updated to: %s", updated.suffix)
        if updated.quick_fix_prompt != previous.quick_fix_prompt:
            logger.info("Quick fix prompt updated")
        if updated.log_level != previous.log_level:
            apply_log_level(updated.log_level)
            logger.info("Log level updated to: %s", updated.log_level)

        return updated

    def reset(self, config: Optional[MentionConfig] = None) -> None:
        """Replace the snapshot wholesale (startup and tests)."""
        with self._write_lock:
            self._config = config or MentionConfig()
        logger.debug("Config store reset")

    def as_settings(self, config: Optional[MentionConfig] = None) -> dict[str, str]:
        """``config`` (default: the current snapshot) keyed by setting name."""
        if config is None:
            config = self._config
        return {key: getattr(config, field) for key, field in SETTING_FIELDS.items()}


# Shared instance used by the API layer
config_store = ConfigStore(default_mention_config())
