import logging
from collections import namedtuple

import nltk

logger = logging.getLogger(__name__)

# end is the offset of the last character (inclusive), tag is None for untagged text
TaggedWord = namedtuple("TaggedWord", ["word", "tag", "begin", "end"])


def _offsets(words):
    # offsets of the words as if they were joined by single spaces
    begin = 0
    for word in words:
        end = begin + len(word) - 1
        yield begin, end
        begin = end + 2


def from_pairs(pairs):
    pairs = list(pairs)
    words = [word for word, _ in pairs]
    return [
        TaggedWord(word, tag, begin, end)
        for (word, tag), (begin, end) in zip(pairs, _offsets(words))
    ]


def from_words(words):
    words = list(words)
    return [TaggedWord(word, None, begin, end) for word, (begin, end) in zip(words, _offsets(words))]


def as_tagged_sentence(sentence):
    # accepts TaggedWords, (word, tag, begin, end) tuples or (word, tag) pairs
    sentence = list(sentence)
    if not sentence or isinstance(sentence[0], TaggedWord):
        return sentence
    if len(sentence[0]) == len(TaggedWord._fields):
        return [TaggedWord(*item) for item in sentence]
    return from_pairs(sentence)


def load_nltk_corpus(name="treebank", tagset=None, limit=None):
    # loads a tagged corpus shipped by nltk (treebank, brown, ...), downloading it if needed.
    nltk.download(name, quiet=True)
    if tagset is not None:
        nltk.download(f"{tagset}_tagset", quiet=True)

    reader = getattr(nltk.corpus, name)
    tagged_sents = reader.tagged_sents(tagset=tagset)
    if limit is not None:
        tagged_sents = tagged_sents[:limit]

    dataset = [from_pairs(sent) for sent in tagged_sents]
    logger.info("Loaded %d sentences from the nltk %s corpus", len(dataset), name)
    return dataset
