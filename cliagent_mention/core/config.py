"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    CLIAGENT_MENTION_PREFIX            — initial prefixString (default: "@")
    CLIAGENT_MENTION_SUFFIX            — initial suffixString (default: ":")
    CLIAGENT_MENTION_QUICK_FIX_PROMPT  — initial quickFixPrompt
    CLIAGENT_MENTION_LOG_LEVEL         — off / trace / debug / info / warn / error (default: debug)
    CLIAGENT_MENTION_LOG_DIR           — directory for daily log files (default: logs)
    CLIAGENT_MENTION_LOG_TO_FILE       — "false" keeps logs on stderr only (default: true)
    CLIAGENT_MENTION_HOST              — bind address for the local service (default: 127.0.0.1)
    CLIAGENT_MENTION_PORT              — bind port for the local service (default: 8765)

Runtime Settings:
    The four mention settings above are only the STARTING values.  After
    startup they live in the ConfigStore and are changed through
    PUT /settings, never by re-reading the environment.
"""
import os
from dotenv import load_dotenv

from cliagent_mention.models.mention_config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PREFIX,
    DEFAULT_QUICK_FIX_PROMPT,
    DEFAULT_SUFFIX,
    MentionConfig,
)

load_dotenv()

PREFIX_STRING = os.getenv("CLIAGENT_MENTION_PREFIX", DEFAULT_PREFIX)
SUFFIX_STRING = os.getenv("CLIAGENT_MENTION_SUFFIX", DEFAULT_SUFFIX)
QUICK_FIX_PROMPT = os.getenv("CLIAGENT_MENTION_QUICK_FIX_PROMPT", DEFAULT_QUICK_FIX_PROMPT)
LOG_LEVEL = os.getenv("CLIAGENT_MENTION_LOG_LEVEL", DEFAULT_LOG_LEVEL)
LOG_DIR = os.getenv("CLIAGENT_MENTION_LOG_DIR", "logs")
LOG_TO_FILE = os.getenv("CLIAGENT_MENTION_LOG_TO_FILE", "true").lower() == "true"

# Local service bind
HOST = os.getenv("CLIAGENT_MENTION_HOST", "127.0.0.1")
PORT = int(os.getenv("CLIAGENT_MENTION_PORT", 8765))


def default_mention_config() -> MentionConfig:
    """Initial MentionConfig snapshot built from the environment."""
    return MentionConfig(
        prefix=PREFIX_STRING,
        suffix=SUFFIX_STRING,
        quick_fix_prompt=QUICK_FIX_PROMPT,
        log_level=LOG_LEVEL,
    )
