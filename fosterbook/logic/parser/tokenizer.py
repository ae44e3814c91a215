"""Splits a prefixed argument string into per-prefix values.

A prefix only counts where a space precedes it, so ``t/`` inside ``at/``
or inside a word such as ``cat/dog`` is never mistaken for a prefix. The
input is treated as if it started with a space, which lets a prefix open
the string.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..exceptions import DuplicatePrefixError
from ..messages import get_error_message_for_duplicate_prefixes
from .cli_syntax import Prefix


@dataclass(frozen=True)
class PrefixPosition:
    prefix: Prefix
    start: int


@dataclass
class ArgumentMultimap:
    """Values keyed by prefix, in the order they appeared, plus the preamble."""

    preamble: str = ""
    _values: Dict[Prefix, List[str]] = field(default_factory=dict)

    def put(self, prefix: Prefix, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: Prefix) -> Optional[str]:
        """Last value given for ``prefix``, or None if it never appeared."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> List[str]:
        return list(self._values.get(prefix, []))

    def get_preamble(self) -> str:
        return self.preamble

    def has(self, prefix: Prefix) -> bool:
        return self.get_value(prefix) is not None

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        duplicated = tuple(
            prefix
            for prefix in dict.fromkeys(prefixes)
            if len(self._values.get(prefix, [])) > 1
        )
        if duplicated:
            raise DuplicatePrefixError(
                get_error_message_for_duplicate_prefixes(duplicated), duplicated
            )


class ArgumentTokenizer:
    @staticmethod
    def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
        padded = " " + args
        positions = ArgumentTokenizer._find_all_prefix_positions(padded, prefixes)
        return ArgumentTokenizer._extract_arguments(padded, positions)

    @staticmethod
    def _find_all_prefix_positions(args: str, prefixes) -> List[PrefixPosition]:
        positions = []
        for prefix in prefixes:
            marker = " " + prefix.prefix
            index = args.find(marker)
            while index != -1:
                positions.append(PrefixPosition(prefix, index + 1))
                index = args.find(marker, index + 1)
        return sorted(positions, key=lambda position: position.start)

    @staticmethod
    def _extract_arguments(
        args: str, positions: List[PrefixPosition]
    ) -> ArgumentMultimap:
        multimap = ArgumentMultimap()
        end_of_preamble = positions[0].start if positions else len(args)
        multimap.preamble = args[:end_of_preamble].strip()

        for current, following in zip(positions, positions[1:] + [None]):
            value_start = current.start + len(current.prefix.prefix)
            value_end = following.start if following is not None else len(args)
            multimap.put(current.prefix, args[value_start:value_end].strip())
        return multimap
