import logging
from pathlib import Path
from dataclasses import dataclass

import toml
import jsonschema

from .charset import Options, DEFAULT_LENGTH

logger = logging.getLogger(__name__)

class ConfigFileException(Exception):
    pass

@dataclass(frozen=True)
class Config:
    """
    Default options read from the user's config.toml. Command line flags
    take precedence over these values.
    """
    length: int
    no_symbols: bool
    no_numbers: bool
    only_letters: bool

    json_schema = {
        "$schema": "http://json-schema.org/draft-07/schema",
        "title": "passgen configuration schema",
        "type": "object",
        "properties": {
            "length": {
                "description": "Default password length",
                "type": "integer",
                "minimum": 1
            },
            "no_symbols": {"type": "boolean"},
            "no_numbers": {"type": "boolean"},
            "only_letters": {"type": "boolean"},
        },
        "additionalProperties": False
    }

    @classmethod
    def default(cls):
        return cls({})

    def __init__(self, dict_data):
        try:
            jsonschema.validate(instance=dict_data, schema=self.json_schema)
        except jsonschema.ValidationError as exc:
            raise ConfigFileException(f"Invalid configuration: {exc.message}") from exc

        object.__setattr__(self, "length", dict_data.get("length", DEFAULT_LENGTH))
        object.__setattr__(self, "no_symbols", dict_data.get("no_symbols", False))
        object.__setattr__(self, "no_numbers", dict_data.get("no_numbers", False))
        object.__setattr__(self, "only_letters", dict_data.get("only_letters", False))

    def dict(self):
        return {
            "length": self.length,
            "no_symbols": self.no_symbols,
            "no_numbers": self.no_numbers,
            "only_letters": self.only_letters,
        }

    def options(self, length=None, no_symbols=False, no_numbers=False,
        only_letters=False) -> Options:
        """
        Merges command line values into the configured defaults. A length
        of None keeps the configured length. Flags can only be switched on.
        """
        return Options(
            length=self.length if length is None else length,
            no_symbols=self.no_symbols or no_symbols,
            no_numbers=self.no_numbers or no_numbers,
            only_letters=self.only_letters or only_letters,
        )

def default_config_fn():
    fn = Path.home() / ".local/share/passgen/config.toml"
    return str(fn)

def load_config(toml_fn, missing_ok: bool = False) -> Config:
    try:
        with open(toml_fn, "r", encoding="utf-8") as f:
            config_dict = toml.load(f)
    except FileNotFoundError:
        if missing_ok:
            logger.debug("No config file at %s, using defaults.", toml_fn)
            return Config.default()
        raise ConfigFileException(f"Config file {toml_fn} not found.")
    except OSError as exc:
        raise ConfigFileException(f"Cannot read {toml_fn}: {exc.strerror}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigFileException(f"Cannot parse {toml_fn}: not valid UTF-8.") from exc
    except toml.TomlDecodeError as exc:
        raise ConfigFileException(f"Cannot parse {toml_fn}: {exc}") from exc

    logger.debug("Loaded config from %s.", toml_fn)
    return Config(config_dict)
