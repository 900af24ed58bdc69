"""
Mention Config
==============
Immutable snapshot of the user-tunable mention settings.

Fields:
    prefix            — string placed before every mention (prefixString, default "@")
    suffix            — line separator for the custom format (suffixString, default ":")
    quick_fix_prompt  — first line of every quick-fix block (quickFixPrompt)
    log_level         — off / trace / debug / info / warn / error (logLevel)

A snapshot is never mutated.  ConfigStore swaps in a new one on update.
"""
from dataclasses import dataclass

DEFAULT_PREFIX = "@"
DEFAULT_SUFFIX = ":"
DEFAULT_QUICK_FIX_PROMPT = "Analyze this error/warning and provide to solve it solution."
DEFAULT_LOG_LEVEL = "debug"


@dataclass(frozen=True)
class MentionConfig:
    prefix: str = DEFAULT_PREFIX
    suffix: str = DEFAULT_SUFFIX
    quick_fix_prompt: str = DEFAULT_QUICK_FIX_PROMPT
    log_level: str = DEFAULT_LOG_LEVEL
