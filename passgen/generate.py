from .charset import (Options, ConfigError, ConfigurationError, MIN_LENGTH,
    selected_classes, describe_classes, build_charset)
from .sampler import sample

class PasswordGenerator:
    """
    Generates password using cryptographically strong randomness.

    Every character is drawn independently and uniformly from the pool
    selected by the options. There is no guarantee that each character class
    actually appears in a given password.
    """
    def __init__(self, options: Options):
        if options.length < MIN_LENGTH:
            raise ConfigurationError(ConfigError.LENGTH_TOO_SHORT,
                f"got {options.length}")

        self.options = options

    @property
    def length(self) -> int:
        return self.options.length

    def classes(self):
        return selected_classes(self.options)

    def charset(self) -> str:
        return build_charset(self.options)

    def generate(self, source=None) -> str:
        """
        Returns:
            Generated password string
        """
        charset = self.charset()
        return sample(self.length, charset, source)

    def spec(self) -> str:
        ingredients = ", ".join(describe_classes(self.classes()))
        pool_size = len(self.charset())
        return f"{self.length} characters from {ingredients} ({pool_size} possible characters)"

def generate_password(options: Options, source=None) -> str:
    return PasswordGenerator(options).generate(source)
