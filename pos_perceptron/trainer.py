import logging
from enum import Enum

import numpy as np

from .config import TrainerConfig
from .corpus import as_tagged_sentence
from .errors import EmptyClassSetError, MissingTrainingSignalError
from .features import FeatureExtractor
from .perceptron import WeightStore
from .predictor import FromModel, TrainedModel, decode
from .tagbook import build_tagbook

logger = logging.getLogger(__name__)


class TrainerState(Enum):
    INITIALIZED = "initialized"
    ITERATING = "iterating"
    AVERAGED = "averaged"


class Trainer:

    def __init__(self, config=None, extractor=None):
        self.config = config if config is not None else TrainerConfig()
        self.extractor = extractor if extractor is not None else FeatureExtractor()
        self.state = TrainerState.INITIALIZED
        self.epoch = 0
        self.clock = 0   # counts model decisions over the whole run, never reset per sentence

    def _prepare(self, sentences):

        sentences = [as_tagged_sentence(sentence) for sentence in sentences]
        if not sentences:
            raise MissingTrainingSignalError("no training sentences were given")

        for sentence in sentences:
            for tagged in sentence:
                if tagged.tag is None:
                    raise MissingTrainingSignalError(f"word {tagged.word!r} at {tagged.begin} has no tag")

        classes = tuple(sorted({tagged.tag for sentence in sentences for tagged in sentence}))
        if not classes:
            raise EmptyClassSetError("the training sentences contain no tags")

        return sentences, classes

    def train(self, sentences):

        config = self.config.validate()
        sentences, classes = self._prepare(sentences)

        tagbook = build_tagbook(sentences, config.frequency_threshold, config.ambiguity_threshold)
        logger.debug("Tag book holds %d words, %d classes", len(tagbook), len(classes))

        store = WeightStore()
        rng = np.random.default_rng(config.seed)
        self.clock = 0

        for epoch in range(1, config.n_iterations + 1):
            self.state = TrainerState.ITERATING
            self.epoch = epoch
            correct, total = self._train_epoch(sentences, rng, tagbook, store, classes)
            logger.debug("Iteration n: %d, training accuracy %.4f", epoch, correct / total if total else 0.0)

        store.average_weights(self.clock)
        self.state = TrainerState.AVERAGED
        logger.info(
            "Finished %d iterations: %d weights, %d tag book words, %d classes",
            config.n_iterations, len(store), len(tagbook), len(classes),
        )
        return TrainedModel(store, tagbook, classes, self.extractor)

    def _train_epoch(self, sentences, rng, tagbook, store, classes):

        correct = 0
        total = 0

        for index in rng.permutation(len(sentences)):
            sentence = sentences[index]
            gold = [tagged.tag for tagged in sentence]

            def learn(i, decision):
                # tag book words are left out of the updates
                if isinstance(decision, FromModel):
                    self.clock += 1
                    store.update(gold[i], decision.tag, decision.features, self.clock)

            decisions = decode([tagged.word for tagged in sentence], tagbook, store, classes, self.extractor, learn)
            correct += sum(decision.tag == tag for decision, tag in zip(decisions, gold))
            total += len(gold)

        return correct, total


def train(sentences, config=None):
    return Trainer(config).train(sentences)
