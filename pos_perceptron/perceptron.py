import logging
from types import MappingProxyType

from .errors import WeightsFrozenError

logger = logging.getLogger(__name__)


class WeightEntry:

    __slots__ = ("weight", "total", "last_updated")

    def __init__(self):
        self.weight = 0.0
        self.total = 0.0   # sum of weight * number of iterations it was held
        self.last_updated = 0

    def accumulate(self, iteration):
        self.total += self.weight * (iteration - self.last_updated)
        self.last_updated = iteration


class WeightStore:
    # sparse (feature, tag) -> weight table of an averaged perceptron.
    # entries are created the first time an update touches them, averaging
    # freezes the store: it can still score but never be updated again.

    def __init__(self):
        self._entries = {}  # feature -> {tag: WeightEntry}
        self.averaged = False

    def __len__(self):
        return sum(len(tags) for tags in self._entries.values())

    def weight(self, feature, tag):
        entry = self._entries.get(feature, {}).get(tag)
        return entry.weight if entry is not None else 0.0

    def score(self, features, tag):

        total = 0.0
        for feature in features:
            entry = self._entries.get(feature, {}).get(tag)
            if entry is not None:
                total += entry.weight
        return total

    def scores(self, features, classes):
        # one pass over the features instead of one per tag
        scores = dict.fromkeys(classes, 0.0)
        for feature in features:
            tags = self._entries.get(feature)
            if not tags:
                continue
            for tag, entry in tags.items():
                if tag in scores:
                    scores[tag] += entry.weight
        return scores

    def predict_tag(self, features, classes):
        # highest score wins, on a tie the smallest tag
        scores = self.scores(features, classes)
        return min(scores, key=lambda tag: (-scores[tag], tag))

    def _entry(self, feature, tag):
        return self._entries.setdefault(feature, {}).setdefault(tag, WeightEntry())

    def update(self, correct_tag, guessed_tag, features, iteration):

        if self.averaged:
            raise WeightsFrozenError("weights were already averaged")

        if correct_tag == guessed_tag:
            return

        for feature in features:
            guessed = self._entry(feature, guessed_tag)
            guessed.accumulate(iteration)
            guessed.weight -= 1.0

            correct = self._entry(feature, correct_tag)
            correct.accumulate(iteration)
            correct.weight += 1.0

    def average_weights(self, final_iteration):

        if self.averaged:
            raise WeightsFrozenError("weights were already averaged")

        if final_iteration <= 0 and self._entries:
            raise ValueError(f"final_iteration must be positive, got {final_iteration}")

        for tags in self._entries.values():
            for entry in tags.values():
                entry.accumulate(final_iteration)
                entry.weight = entry.total / final_iteration

        self.averaged = True
        logger.debug("Averaged %d weights over %d iterations", len(self), final_iteration)
        return self.weights()

    def weights(self):
        # read only view: feature -> {tag: weight}
        return MappingProxyType({
            feature: MappingProxyType({tag: entry.weight for tag, entry in tags.items()})
            for feature, tags in self._entries.items()
        })
