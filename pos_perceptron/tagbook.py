import logging
from collections import defaultdict, Counter
from types import MappingProxyType

logger = logging.getLogger(__name__)


def count_tags(sentences):
    # word (lowercased) -> Counter of the tags it took
    # counts of separate shards can be merged with merge_counts before building the book
    counts = defaultdict(Counter)

    for sentence in sentences:
        for tagged in sentence:
            counts[tagged.word.lower()][tagged.tag] += 1

    return counts


def merge_counts(*shards):

    merged = defaultdict(Counter)
    for shard in shards:
        for word, tag_counts in shard.items():
            merged[word].update(tag_counts)
    return merged


def modal_tag(tag_counts):
    # most frequent tag, ties go to the smallest tag
    return min(tag_counts.items(), key=lambda item: (-item[1], item[0]))


def build_tagbook_from_counts(counts, frequency_threshold=20, ambiguity_threshold=0.97):

    tagbook = {}

    for word, tag_counts in counts.items():
        tag, mode = modal_tag(tag_counts)
        n = sum(tag_counts.values())

        if n >= frequency_threshold and mode / n >= ambiguity_threshold:
            logger.debug("Ambiguity discarded on: << %s >> set to: << %s >>", word, tag)
            tagbook[word] = tag

    return MappingProxyType(tagbook)


def build_tagbook(sentences, frequency_threshold=20, ambiguity_threshold=0.97):
    # map every frequent and unambiguous word (lowercased) to its dominant tag
    counts = count_tags(sentences)
    return build_tagbook_from_counts(counts, frequency_threshold, ambiguity_threshold)
