from pos_perceptron import FeatureExtractor, build_context

extractor = FeatureExtractor()


def test_features_are_deterministic():
    words = ["The", "quick", "fox"]
    context = build_context(words)

    first = extractor.word2features(1, "quick", context, "DT", "-START-")
    second = extractor.word2features(1, "quick", build_context(words), "DT", "-START-")
    assert first == second


def test_feature_content():
    words = ["The", "Well-known", "fox", "jumps"]
    context = build_context(words)
    features = extractor.word2features(1, "Well-known", context, "DT", "-START-")

    assert "bias" in features
    assert "i word !HYPHEN" in features
    assert "i suffix own" in features
    assert "i pref1 W" in features
    assert "i title" in features
    assert "i has-hyphen" in features
    assert "i has-digit" not in features
    assert "i-1 tag DT" in features
    assert "i-2 tag -START-" in features
    assert "i tag+i-2 tag DT -START-" in features
    assert "i-1 tag+i word DT !HYPHEN" in features
    assert "i-1 word the" in features
    assert "i-2 word -START-" in features
    assert "i+1 word fox" in features
    assert "i+2 word jumps" in features


def test_features_at_sentence_edges():
    context = build_context(["R2D2"])
    features = extractor.word2features(0, "R2D2", context, "-START-", "-START2-")

    assert "i-1 word -START2-" in features
    assert "i-2 word -START-" in features
    assert "i+1 word -END-" in features
    assert "i+2 word -END2-" in features
    assert "i has-digit" in features


def test_features_depend_on_previous_tags():
    context = build_context(["a", "run"])
    as_noun = extractor.word2features(1, "run", context, "DT", "-START-")
    as_verb = extractor.word2features(1, "run", context, "PRP", "-START-")
    assert as_noun != as_verb
