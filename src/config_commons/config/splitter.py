"""
Dzielenie tekstu z uwzględnieniem cytowania pojedynczym apostrofem.

Format używany przez listy i mapy w postaci tekstowej:
- elementy oddzielone są znakiem separatora (np. `,` lub `:`),
- element objęty apostrofami jest atomowy, nawet jeśli zawiera separator,
- podwojony apostrof wewnątrz cytowania oznacza dosłowny apostrof.

Dla dowolnego tekstu `s` i separatora `d` zachodzi:
`split_escaped(escape_with_single_quote(s, d), d) == [s]`.
Separatorem może być dowolny pojedynczy znak poza apostrofem i białymi
znakami: segmenty bez cytowania są przycinane, więc separator biały
zniknąłby razem z nimi.
"""

from typing import List

from .exceptions import ParseFormatError

QUOTE = "'"


def _check_delimiter(delimiter: str) -> None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
    if delimiter == QUOTE or delimiter.isspace():
        raise ValueError(f"Delimiter cannot be a quote or whitespace, got {delimiter!r}")


def _consume_in_quotes(text: str, start: int):
    # start wskazuje na apostrof otwierajacy
    chars = []
    cursor = start + 1
    while cursor < len(text):
        c = text[cursor]
        if c == QUOTE:
            if cursor + 1 < len(text) and text[cursor + 1] == QUOTE:
                chars.append(QUOTE)
                cursor += 2
                continue
            return "".join(chars), cursor + 1
        chars.append(c)
        cursor += 1
    raise ParseFormatError(
        f"Could not split string. Quoting was not closed properly at position: {start}", text
    )


def _skip_whitespace(text: str, cursor: int) -> int:
    while cursor < len(text) and text[cursor].isspace():
        cursor += 1
    return cursor


def split_escaped(text: str, delimiter: str) -> List[str]:
    """
    Dzieli tekst na segmenty według separatora, respektując cytowanie.

    Segmenty bez cytowania są przycinane z białych znaków. Pusty (lub
    złożony z białych znaków) tekst daje pustą listę, a pusty segment
    pomiędzy separatorami daje `""`.

    Args:
        text (str): Tekst do podziału.
        delimiter (str): Pojedynczy znak separatora.

    Returns:
        List[str]: Segmenty w kolejności występowania.

    Raises:
        ParseFormatError: Gdy cytowanie nie jest zamknięte albo po cytowaniu
            występuje coś innego niż separator.
        ValueError: Gdy separator nie jest pojedynczym znakiem albo jest apostrofem
            lub białym znakiem.
    """
    _check_delimiter(delimiter)
    if not text.strip():
        return []

    segments = []
    cursor = 0
    while True:
        cursor = _skip_whitespace(text, cursor)
        if cursor < len(text) and text[cursor] == QUOTE:
            segment, cursor = _consume_in_quotes(text, cursor)
            cursor = _skip_whitespace(text, cursor)
            if cursor < len(text) and text[cursor] != delimiter:
                raise ParseFormatError(
                    f"Could not split string. Illegal quoting at position: {cursor}", text
                )
        else:
            end = text.find(delimiter, cursor)
            if end == -1:
                end = len(text)
            segment = text[cursor:end].strip()
            cursor = end

        segments.append(segment)
        if cursor >= len(text):
            return segments
        cursor += 1  # separator


def escape_with_single_quote(text: str, delimiter: str) -> str:
    """
    Obejmuje tekst apostrofami (podwajając wewnętrzne apostrofy), jeśli
    zawiera separator lub apostrof.

    Cytowany jest również tekst pusty oraz tekst z białymi znakami na
    początku lub końcu, bo `split_escaped` traci je w segmentach bez cytowania.
    W pozostałych przypadkach tekst zwracany jest bez zmian.
    """
    _check_delimiter(delimiter)
    if text == "" or text != text.strip() or QUOTE in text or delimiter in text:
        return QUOTE + text.replace(QUOTE, QUOTE + QUOTE) + QUOTE
    return text
