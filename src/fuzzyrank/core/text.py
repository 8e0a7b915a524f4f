"""
Text Normalization

Case folding and boundary canonicalization used to build the comparison
strings the scorer walks. Every function here preserves length: index i of
the output always corresponds to index i of the input.
"""

SPECIAL_CHARS = frozenset('\\/_+.#"@[({&')


def is_special_char(char: str) -> bool:
    """Path, identifier and punctuation separators (`_`, `/`, `.` ...)."""
    return char in SPECIAL_CHARS


def is_word_boundary(char: str) -> bool:
    """Whitespace or hyphen."""
    return char == "-" or (char != "" and char.isspace())


def fold_case(text: str) -> str:
    """
    Lower-case text one character at a time.

    Characters whose lower-case form expands to several code points
    (e.g. "İ") are kept as-is so offsets stay aligned with the original.
    """
    if text.islower() or not text:
        return text
    folded = []
    for char in text:
        lower = char.lower()
        folded.append(lower if len(lower) == 1 else char)
    return "".join(folded)


def normalize_text(text: str) -> str:
    """Fold case and rewrite each whitespace or hyphen to a single space."""
    return "".join(" " if is_word_boundary(c) else c for c in fold_case(text))
