from .corpus import as_tagged_sentence


def accuracy(model, gold_sentences):
    # share of the tokens whose predicted tag equals the gold tag.
    correct = 0
    total = 0

    for sentence in gold_sentences:
        sentence = as_tagged_sentence(sentence)
        predicted = model.predict([tagged.word for tagged in sentence])
        for tagged, tag in zip(sentence, predicted):
            if tagged.tag == tag:
                correct += 1
            total += 1

    return correct / total if total else 0.0
