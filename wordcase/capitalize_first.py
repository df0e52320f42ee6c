"""Utility for capitalizing the first character of a token."""


def capitalize_first(token: str) -> str:
    """Uppercase the first character and keep the rest; digits are unaffected.

    Characters whose uppercase form is longer than one character ('ß' -> 'SS')
    are left unchanged so the token keeps its length.
    """
    if not token:
        return token
    head = token[0].upper()
    if len(head) != 1:
        head = token[0]
    return head + token[1:]
