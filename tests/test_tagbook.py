from collections import Counter

import pytest

from pos_perceptron import from_pairs
from pos_perceptron.tagbook import build_tagbook, count_tags, merge_counts, modal_tag


def sentences_of(pairs):
    return [from_pairs([pair]) for pair in pairs]


def test_exact_thresholds_are_included():
    corpus = sentences_of([("run", "VB")] * 19 + [("run", "NN")])
    tagbook = build_tagbook(corpus, frequency_threshold=20, ambiguity_threshold=0.95)
    assert tagbook == {"run": "VB"}


def test_below_purity_is_excluded():
    corpus = sentences_of([("run", "VB")] * 18 + [("run", "NN")] * 2)
    assert build_tagbook(corpus, frequency_threshold=20, ambiguity_threshold=0.95) == {}


def test_one_occurrence_too_few_is_excluded():
    corpus = sentences_of([("run", "VB")] * 19)
    assert "run" not in build_tagbook(corpus, frequency_threshold=20, ambiguity_threshold=0.95)
    corpus = sentences_of([("run", "VB")] * 20)
    assert build_tagbook(corpus, frequency_threshold=20, ambiguity_threshold=0.95)["run"] == "VB"


def test_default_thresholds(animal_corpus):
    tagbook = build_tagbook(animal_corpus)
    assert tagbook == {"the": "DT", "runs": "VBZ", ".": "."}


def test_words_are_grouped_lowercased():
    corpus = sentences_of([("The", "DT")] * 10 + [("the", "DT")] * 10)
    assert build_tagbook(corpus) == {"the": "DT"}


def test_tagbook_is_read_only():
    tagbook = build_tagbook(sentences_of([("a", "DT")] * 20))
    with pytest.raises(TypeError):
        tagbook["b"] = "DT"


def test_modal_tag_ties_pick_smallest_tag():
    assert modal_tag(Counter({"VB": 2, "NN": 2})) == ("NN", 2)
    assert modal_tag(Counter({"VB": 3, "NN": 2})) == ("VB", 3)


def test_merged_shards_match_full_scan():
    corpus = sentences_of([("run", "VB")] * 15 + [("run", "NN")] + [("dog", "NN")] * 5)
    merged = merge_counts(count_tags(corpus[:7]), count_tags(corpus[7:]))
    assert merged == count_tags(corpus)
