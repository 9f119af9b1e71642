from pos_perceptron import END, START, build_context, normalize


def test_normalize():
    assert normalize("Dog") == "dog"
    assert normalize("well-known") == "!HYPHEN"
    assert normalize("-") == "-"
    assert normalize("1984") == "!YEAR"
    assert normalize("42") == "!DIGITS"
    assert normalize("3rd") == "!DIGITS"


def test_context_is_padded():
    words = ["The", "dog", "runs"]
    context = build_context(words)

    assert len(context) == len(words) + 4
    assert context[:2] == START
    assert context[-2:] == END
    for i, word in enumerate(words):
        assert context[i + 2] == normalize(word)


def test_empty_sentence_context():
    assert build_context([]) == START + END
