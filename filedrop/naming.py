import random
from typing import Optional


class NameGenerator:
    """Candidate names `<prefix><NNN><extension>`, one independent draw per call."""

    def __init__(
        self,
        suffix_range: int = 1000,
        width: int = 3,
        extension: str = ".txt",
        rng: Optional[random.Random] = None,
    ) -> None:
        if suffix_range < 1:
            raise ValueError("suffix_range must be at least 1")
        if suffix_range > 10 ** width:
            raise ValueError(f"suffix_range {suffix_range} does not fit in {width} digits")
        self.suffix_range = suffix_range
        self.width = width
        self.extension = extension
        self._rng = rng or random.Random()

    def __call__(self, prefix: str) -> str:
        suffix = self._rng.randrange(self.suffix_range)
        return f"{prefix}{suffix:0{self.width}d}{self.extension}"
