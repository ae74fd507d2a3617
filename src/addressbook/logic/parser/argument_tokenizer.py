"""Splits argument text into the values that follow each prefix."""

import re

from .cli_syntax import PREAMBLE, Prefix


class ArgumentMultimap:
    """Maps each prefix to every value given for it, in input order."""

    def __init__(self) -> None:
        self._values: dict[Prefix, list[str]] = {}

    def put(self, prefix: Prefix, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value given for ``prefix``, or None if absent."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def is_present(self, prefix: Prefix) -> bool:
        return prefix in self._values

    def get_preamble(self) -> str:
        return self.get_value(PREAMBLE) or ""


def tokenize(args_string: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Tokenize ``args_string`` on the given prefixes.

    A prefix is only recognised when it follows whitespace, so
    ``" n/Alice p/123"`` yields ``n/ -> "Alice"`` and ``p/ -> "123"``, while
    the ``e/`` inside ``"n/Bob e/x@y.com"`` is found but the one inside
    ``"n/Bobe/x"`` is not. Values are trimmed.
    """
    positions = sorted(
        (
            (match.start(), prefix)
            for prefix in prefixes
            for match in re.finditer(rf"(?<=\s){re.escape(prefix.prefix)}", args_string)
        ),
        key=lambda position: position[0],
    )

    multimap = ArgumentMultimap()
    first = positions[0][0] if positions else len(args_string)
    multimap.put(PREAMBLE, args_string[:first].strip())

    for i, (start, prefix) in enumerate(positions):
        end = positions[i + 1][0] if i + 1 < len(positions) else len(args_string)
        multimap.put(prefix, args_string[start + len(prefix.prefix) : end].strip())

    return multimap
