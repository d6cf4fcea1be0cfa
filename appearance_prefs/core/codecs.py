"""Two-way mappings between domain values and preference-store primitives."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from ..models.instant import Instant
from ..models.scheme_choice import SchemeChoice

T = TypeVar('T')
P = TypeVar('P')


class Codec(ABC, Generic[T, P]):
    """Converts a value of type T to a storable primitive P and back."""

    @abstractmethod
    def encode(self, value: T) -> P:
        """Convert a value to its stored form."""

    @abstractmethod
    def decode(self, raw: Any) -> T:
        """Convert a stored form back to a value."""


class InstantCodec(Codec[Instant, str]):
    """Stores an Instant as the decimal text of its epoch offset.

    Decoding never fails: text that does not parse as a float yields the
    reference epoch. Callers cannot tell a corrupt entry from a stored 0.0.
    Unlike float(), surrounding whitespace and "_" digit separators are
    rejected; "inf" and "nan" are accepted.
    """

    def encode(self, value: Instant) -> str:
        return repr(value.offset)

    def decode(self, raw: Any) -> Instant:
        if isinstance(raw, str) and (raw != raw.strip() or "_" in raw):
            logging.debug("Unparseable instant %r, using reference epoch", raw)
            return Instant.epoch()

        try:
            return Instant(float(raw))
        except (TypeError, ValueError):
            logging.debug("Unparseable instant %r, using reference epoch", raw)
            return Instant.epoch()


class SchemeChoiceCodec(Codec[SchemeChoice, int]):
    """Stores a SchemeChoice as its ordinal.

    Unknown ordinals and non-integer values decode to AUTOMATIC. Strings
    holding an integer are accepted since INI-backed QSettings returns text.
    """

    def encode(self, value: SchemeChoice) -> int:
        return int(SchemeChoice(value))

    def decode(self, raw: Any) -> SchemeChoice:
        ordinal = raw
        if isinstance(raw, str):
            try:
                ordinal = int(raw.strip())
            except ValueError:
                ordinal = None

        if isinstance(ordinal, int) and not isinstance(ordinal, bool):
            try:
                return SchemeChoice(ordinal)
            except ValueError:
                pass

        logging.warning(f"Invalid color scheme value {raw!r}, using automatic")
        return SchemeChoice.AUTOMATIC


instant_codec = InstantCodec()
scheme_choice_codec = SchemeChoiceCodec()
