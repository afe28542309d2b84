# logic/parser/argument_tokenizer.py

"""
Splits an argument string into prefix/value pairs.

Given `" 1 n/John Doe t/friend t/cs"` and the prefixes `n/` and `t/`, the
tokenizer produces an `ArgumentMultimap` with preamble "1", `n/` -> ["John Doe"]
and `t/` -> ["friend", "cs"].

A prefix is only recognized at the start of the string or after whitespace,
so "john@ex.com" never splits on `e/`-like substrings and `t/` is never found
inside `at/`. Values run until the next recognized prefix and are stripped.
"""

from __future__ import annotations

import re

from logic.parser.cli_syntax import Prefix


class ArgumentMultimap:

    def __init__(self, preamble: str = ""):
        self._preamble: str = preamble
        self._values: dict[Prefix, list[str]] = {}

    def put(self, prefix: Prefix, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    # === data accessors ===

    @property
    def preamble(self) -> str:
        return self._preamble

    def get_value(self, prefix: Prefix) -> str | None:
        """Returns the last value given for `prefix`, or None if it was never given."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def is_present(self, prefix: Prefix) -> bool:
        return prefix in self._values

    def are_all_present(self, *prefixes: Prefix) -> bool:
        return all(self.is_present(p) for p in prefixes)


def tokenize(args_string: str, *prefixes: Prefix) -> ArgumentMultimap:
    if not prefixes:
        return ArgumentMultimap(args_string.strip())

    # longest first, so a longer prefix wins over one that is its suffix
    alternatives = "|".join(
        re.escape(p.prefix) for p in sorted(prefixes, key=lambda p: -len(p.prefix))
    )
    pattern = re.compile(rf"(?<!\S)({alternatives})")
    by_text = {p.prefix: p for p in prefixes}

    matches = list(pattern.finditer(args_string))

    end_of_preamble = matches[0].start() if matches else len(args_string)
    multimap = ArgumentMultimap(args_string[:end_of_preamble].strip())

    for i, match in enumerate(matches):
        value_start = match.end()
        value_end = matches[i + 1].start() if i + 1 < len(matches) else len(args_string)
        multimap.put(by_text[match.group(1)], args_string[value_start:value_end].strip())

    return multimap
