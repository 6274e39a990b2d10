ESCAPE = "!"


def fold(text: str) -> str:
    """
    Lowercases the text, marking every uppercase letter with a leading '!'.

    Parameters:
    text (str): Mixed-case text.

    Returns:
    str: Text without uppercase letters, e.g. "Ab" -> "!ab".
    """
    folded = []
    for char in text:
        if char.isupper():
            folded.append(ESCAPE)
            folded.append(char.lower())
        else:
            folded.append(char)
    return "".join(folded)


def restore(text: str) -> str:
    """
    Reverses ``fold``.

    Every '!' is consumed as a marker, so a literal '!' from the original
    text does not survive the round trip.
    """
    restored = []
    capitalize_next = False
    for char in text:
        if char == ESCAPE:
            capitalize_next = True
            continue
        if capitalize_next and char.isalpha():
            restored.append(char.upper())
        else:
            restored.append(char)
        capitalize_next = False
    return "".join(restored)
