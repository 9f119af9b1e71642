import pytest

from pos_perceptron import from_pairs

NOUNS = ["dog", "bird", "horse", "fox", "cow", "pig", "duck", "goat", "mouse", "sheep"]


@pytest.fixture
def animal_corpus():
    # 100 sentences "The <noun> runs ." with every noun seen 10 times
    return [from_pairs([("The", "DT"), (NOUNS[i % len(NOUNS)], "NN"), ("runs", "VBZ"), (".", ".")]) for i in range(100)]
