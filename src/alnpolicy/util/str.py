"""String utility functions."""

from typing import Optional

def abbreviate(
        text: Optional[str],
        length: int = 20,
        suffix: str = '...',
) -> str:
    """Abbreviate a string for error messages.

    Strings longer than `length` are truncated and `suffix` is appended. `None` is returned as an
    empty string so messages can be built without checking for missing values.

    :param text: String to abbreviate.
    :param length: Maximum number of characters to keep.
    :param suffix: Appended to truncated strings.

    :return: Abbreviated string.
    """

    if text is None:
        return ''

    text = str(text)

    if length is None or len(text) <= length:
        return text

    return text[:length] + suffix
