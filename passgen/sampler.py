import logging
import secrets
from abc import ABCMeta, abstractmethod

logger = logging.getLogger(__name__)

class EntropyError(Exception):
    pass

class IndexSource(metaclass=ABCMeta):
    """
    Source of uniformly distributed random indices.
    """

    @abstractmethod
    def index(self, upper: int) -> int:
        """
        Returns:
            Random integer in range [0, upper), each value equally likely.
        """
        pass

class SystemIndexSource(IndexSource):
    """
    Draws indices from the operating system's CSPRNG.

    For an upper bound n, the smallest number of bits k with 2**k >= n is
    drawn. Values >= n are rejected and drawn again. Every accepted value is
    equally likely, so there is no modulo bias for any n. At most half of the
    draws are rejected on average.
    """

    def __init__(self):
        self.rejected = 0

    def draw_bits(self, k: int) -> int:
        try:
            return secrets.randbits(k)
        except (OSError, NotImplementedError) as exc:
            raise EntropyError(f"Operating system entropy source failed: {exc}") from exc

    def index(self, upper: int) -> int:
        if upper <= 0:
            raise ValueError("upper must be at least 1.")
        k = (upper - 1).bit_length()
        while True:
            value = self.draw_bits(k)
            if value < upper:
                return value
            self.rejected += 1

def sample(length: int, charset: str, source=None) -> str:
    """
    Draws length characters from charset, independently and with replacement.

    Args:
        length: Number of characters to draw.
        charset: Characters to choose from. If empty, the empty string is
            returned without drawing any entropy.
        source: IndexSource to use. Defaults to a fresh SystemIndexSource.

    Returns:
        The drawn characters, concatenated in draw order.

    Raises:
        EntropyError: if the operating system cannot provide random data.
    """
    if length < 0:
        raise ValueError("length must not be negative.")

    if len(charset) == 0:
        return ""

    if source is None:
        source = SystemIndexSource()

    pw = []
    for i in range(length):
        pw.append(charset[source.index(len(charset))])

    if isinstance(source, SystemIndexSource):
        logger.debug("Sampled %d characters, %d draws rejected.", length, source.rejected)

    return "".join(pw)
