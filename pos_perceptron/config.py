import logging
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class TrainerConfig:
    # parameters of a training run
    n_iterations: int = 5
    # a word needs at least this many occurrences to enter the tag book
    frequency_threshold: int = 20
    # and its most frequent tag must cover at least this share of them
    ambiguity_threshold: float = 0.97
    # seed for the per epoch shuffle, None draws fresh entropy
    seed: Optional[int] = 0

    def validate(self):

        if isinstance(self.n_iterations, bool) or not isinstance(self.n_iterations, int) or self.n_iterations <= 0:
            raise InvalidConfigurationError(f"n_iterations must be a positive integer, got {self.n_iterations!r}")

        if isinstance(self.frequency_threshold, bool) or not isinstance(self.frequency_threshold, int) or self.frequency_threshold < 1:
            raise InvalidConfigurationError(f"frequency_threshold must be an integer >= 1, got {self.frequency_threshold!r}")

        if isinstance(self.ambiguity_threshold, bool) or not isinstance(self.ambiguity_threshold, (int, float)) \
                or not (0.0 < self.ambiguity_threshold <= 1.0):
            raise InvalidConfigurationError(f"ambiguity_threshold must be in (0, 1], got {self.ambiguity_threshold!r}")

        logger.debug("Trainer configuration %s", self)
        return self
