START = ["-START-", "-START2-"]
END = ["-END-", "-END2-"]


def normalize(word):
    # collapse hyphenated words, years and numbers so they share features
    if "-" in word and word[0] != "-":
        return "!HYPHEN"
    if word.isdigit() and len(word) == 4:
        return "!YEAR"
    if word and word[0].isdigit():
        return "!DIGITS"
    return word.lower()


def build_context(words):
    # word i of the sentence sits at index i + len(START) of the context
    return START + [normalize(word) for word in words] + END
