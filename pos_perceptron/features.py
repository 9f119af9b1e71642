from .context import START


class FeatureExtractor:
    def __init__(self, suffix_length=3, prefix_length=1):
        self.suffix_length = suffix_length
        self.prefix_length = prefix_length

    def word2features(self, i, word, context, prev, prev2):
        # this function creates the features of the word at position i of the sentence.
        # prev and prev2 are the tags predicted for the two words before it.
        features = set()

        def add(name, *args):
            features.add(" ".join((name,) + args))

        c = i + len(START)  # position of the word inside the padded context

        # Base features for the current word
        add("bias")
        add("i word", context[c])
        add("i suffix", word[-self.suffix_length:])
        add("i pref1", word[:self.prefix_length])
        if word[:1].isupper():
            add("i title")  # uppercase initial
        if any(ch.isdigit() for ch in word):
            add("i has-digit")
        if "-" in word:
            add("i has-hyphen")

        # Features from the tags predicted so far
        add("i-1 tag", prev)
        add("i-2 tag", prev2)
        add("i tag+i-2 tag", prev, prev2)
        add("i-1 tag+i word", prev, context[c])

        # Features from the neighbouring words
        add("i-1 word", context[c - 1])
        add("i-1 suffix", context[c - 1][-self.suffix_length:])
        add("i-2 word", context[c - 2])
        add("i+1 word", context[c + 1])
        add("i+1 suffix", context[c + 1][-self.suffix_length:])
        add("i+2 word", context[c + 2])

        return frozenset(features)
