from collections.abc import Iterable


def uppercase(text: str) -> str:
    return text.upper()


def lowercase(text: str) -> str:
    return text.lower()


def implode(items: Iterable, delimiter: str) -> str:
    """Join items with delimiter, stringifying each."""
    return delimiter.join(str(item) for item in items)


def split(text: str, delimiter: str) -> list[str]:
    """Split on delimiter.

    Empty input yields no pieces and a trailing delimiter does not produce a
    trailing empty piece. Interior empty pieces are kept.
    """
    if not delimiter:
        raise ValueError("Delimiter cannot be empty")
    pieces: list[str] = []
    while text:
        head, sep, text = text.partition(delimiter)
        pieces.append(head)
        if not sep:
            break
    return pieces


__all__ = ["uppercase", "lowercase", "implode", "split"]
