from collections import namedtuple
from dataclasses import dataclass, field

from .context import START, build_context
from .corpus import TaggedWord
from .features import FeatureExtractor


# how the tag of a token was decided
FromTagBook = namedtuple("FromTagBook", ["tag"])
FromModel = namedtuple("FromModel", ["tag", "features"])


class History(namedtuple("History", ["prev", "prev2"])):
    # the two previously predicted tags, carried left to right through a sentence

    @classmethod
    def start(cls):
        return cls(START[0], START[1])

    def push(self, tag):
        return History(tag, self.prev)


def decide(i, word, context, history, tagbook, store, classes, extractor):
    # words of the tag book never reach the weights
    tag = tagbook.get(word.lower())
    if tag is not None:
        return FromTagBook(tag)

    features = extractor.word2features(i, word, context, history.prev, history.prev2)
    return FromModel(store.predict_tag(features, classes), features)


def decode(words, tagbook, store, classes, extractor, on_decision=None):
    # greedy left to right decoding, every guess becomes the history of the next word.
    # on_decision(i, decision) is called before moving on, the trainer updates the weights there.
    context = build_context(words)
    history = History.start()
    decisions = []

    for i, word in enumerate(words):
        decision = decide(i, word, context, history, tagbook, store, classes, extractor)
        if on_decision is not None:
            on_decision(i, decision)
        decisions.append(decision)
        history = history.push(decision.tag)

    return decisions


@dataclass(frozen=True)
class TrainedModel:
    store: object           # averaged WeightStore
    tagbook: object         # read only word -> tag mapping
    classes: tuple
    extractor: FeatureExtractor = field(default_factory=FeatureExtractor)

    @property
    def weights(self):
        return self.store.weights()

    def decisions(self, words):
        return decode(list(words), self.tagbook, self.store, self.classes, self.extractor)

    def predict(self, words):
        return [decision.tag for decision in self.decisions(words)]


def tag_sentence(model, tokens):
    # tag a sentence given as (word, begin, end) tokens or TaggedWords
    tokens = [TaggedWord(token[0], None, token[-2], token[-1]) for token in tokens]
    tags = model.predict([token.word for token in tokens])
    return [token._replace(tag=tag) for token, tag in zip(tokens, tags)]
