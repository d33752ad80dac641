import logging
import string
from enum import Enum
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MIN_LENGTH = 8
DEFAULT_LENGTH = 16

class CharacterClass(Enum):
    UPPERCASE = string.ascii_uppercase
    LOWERCASE = string.ascii_lowercase
    DIGIT = string.digits
    SYMBOL = "!@#$%^&*()-_=+[]{};:,.<>?"

    @property
    def label(self) -> str:
        return _labels[self]

_labels = {
    CharacterClass.UPPERCASE: "A-Z",
    CharacterClass.LOWERCASE: "a-z",
    CharacterClass.DIGIT: "0-9",
    CharacterClass.SYMBOL: "symbols",
}

class ConfigError(Enum):
    LENGTH_TOO_SHORT = 1
    EMPTY_CHARSET = 2

_messages = {
    ConfigError.LENGTH_TOO_SHORT: f"Password length must be at least {MIN_LENGTH} characters.",
    ConfigError.EMPTY_CHARSET: "Character set is empty. Please check your flags.",
}

class ConfigurationError(Exception):
    def __init__(self, error: ConfigError, detail=None):
        self.error = error
        self.detail = detail

    def __str__(self):
        msg = _messages[self.error]
        if self.detail:
            msg = f"{msg} ({self.detail})"
        return msg

@dataclass(frozen=True)
class Options:
    length: int = DEFAULT_LENGTH
    no_numbers: bool = False
    no_symbols: bool = False
    only_letters: bool = False

# One rule per class. Each rule looks at the options only, never at what
# other rules decided, so the order of evaluation does not matter.
inclusion_rules = {
    CharacterClass.UPPERCASE: lambda o: True,
    CharacterClass.LOWERCASE: lambda o: True,
    CharacterClass.DIGIT: lambda o: not (o.only_letters or o.no_numbers),
    CharacterClass.SYMBOL: lambda o: not (o.only_letters or o.no_symbols),
}

def selected_classes(options: Options) -> list[CharacterClass]:
    """
    Returns the character classes enabled by options, in canonical order
    (uppercase, lowercase, digits, symbols).
    """
    return [cls for cls in CharacterClass if inclusion_rules[cls](options)]

def describe_classes(classes) -> list[str]:
    return [cls.label for cls in classes]

def build_charset(options: Options) -> str:
    """
    Concatenates the selected character classes.

    Raises:
        ConfigurationError: if no characters remain.
    """
    charset = "".join(cls.value for cls in selected_classes(options))
    if len(charset) == 0:
        raise ConfigurationError(ConfigError.EMPTY_CHARSET)
    logger.debug("Charset built with %d characters.", len(charset))
    return charset
