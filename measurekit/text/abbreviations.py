"""Culture-partitioned registry of unit abbreviations.

The registry maps (culture, unit type, unit value) to an ordered list of
abbreviations and keeps a reverse index from abbreviation to unit values, so
the same data serves formatting ("which abbreviation shows this unit?") and
parsing ("which unit does this abbreviation denote?"). One unit can have many
abbreviations and, ambiguously, one abbreviation can denote several units.

Lookup uses a one-hop fallback chain: the requested culture first, then the
fixed FALLBACK_CULTURE (en-US). No deeper chain is attempted.

Registration does not deduplicate: registering the same abbreviation twice
stores it twice in both directions.

Initialization:
    The process-wide instance is created on first use of
    ``UnitAbbreviationsCache.default()``. Before any lookup or registration the
    cache loads the built-in localizations of every registered quantity kind;
    kinds declared later are loaded on the next access.

Concurrency:
    Reads never take a lock. Each (culture, unit type) lookup publishes an
    immutable snapshot of both maps in a single assignment and the table of
    lookups is replaced rather than mutated, so a reader always sees a
    consistent state. Writers serialise on a lock; a registration that has
    returned is visible to every lookup that starts afterwards.

Example:
    >>> cache = UnitAbbreviationsCache.default()
    >>> cache.map_unit_to_abbreviation(LengthUnit.METER, "metre", culture="en-GB")
    >>> cache.get_units_for_abbreviation(LengthUnit, "metre", "en-GB")
    [1]
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, ClassVar, NamedTuple

from ..config import FALLBACK_CULTURE, Culture, get_culture
from ..errors import ArgumentNullError, InvalidArgumentError
from ..unit.unit_base import registered_kinds

logger = logging.getLogger(__name__)

LookupKey = tuple[str, type[Enum]]


class _Snapshot(NamedTuple):
    unit_to_abbreviations: Mapping[Any, tuple[str, ...]]
    abbreviation_to_units: Mapping[str, tuple[Any, ...]]


_EMPTY = _Snapshot({}, {})


class UnitValueAbbreviationLookup:
    """Bidirectional abbreviation map for one (culture, unit type) pair.

    Readers see an immutable snapshot; ``add`` builds and publishes a new one
    and must only be called while holding the owning cache's lock.
    """

    __slots__ = ("_snapshot",)

    def __init__(self):
        self._snapshot = _EMPTY

    def get_abbreviations_for_unit(self, unit_value) -> tuple[str, ...]:
        return self._snapshot.unit_to_abbreviations.get(unit_value, ())

    def get_units_for_abbreviation(self, abbreviation: str) -> tuple[Any, ...]:
        return self._snapshot.abbreviation_to_units.get(abbreviation, ())

    def get_all_abbreviations(self) -> tuple[str, ...]:
        return tuple(a for abbreviations in self._snapshot.unit_to_abbreviations.values() for a in abbreviations)

    def add(self, unit_value, abbreviations: Iterable[str]) -> None:
        current = self._snapshot
        forward = dict(current.unit_to_abbreviations)
        reverse = dict(current.abbreviation_to_units)
        for abbreviation in abbreviations:
            forward[unit_value] = forward.get(unit_value, ()) + (abbreviation,)
            reverse[abbreviation] = reverse.get(abbreviation, ()) + (unit_value,)
        self._snapshot = _Snapshot(forward, reverse)


class UnitAbbreviationsCache:
    """Process-wide, culture-aware abbreviation registry.

    Attributes:
        fallback_culture: Culture consulted when the requested one has no data.
    """

    _default: ClassVar[UnitAbbreviationsCache | None] = None
    _default_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, load_builtin: bool = True, fallback_culture: Culture = FALLBACK_CULTURE):
        """Create an empty cache.

        Args:
            load_builtin: Load the built-in localizations of registered kinds
                before the first lookup or registration.
            fallback_culture: Culture consulted when the requested one has no data.
        """
        self.fallback_culture = fallback_culture
        self._load_builtin = load_builtin
        self._lock = threading.RLock()
        self._lookups: Mapping[LookupKey, UnitValueAbbreviationLookup] = {}
        self._loaded_kinds: frozenset[str] = frozenset()

    @classmethod
    def default(cls) -> UnitAbbreviationsCache:
        """Return the process-wide cache, creating it on first use."""
        cache = cls._default
        if cache is None:
            with cls._default_lock:
                if cls._default is None:
                    cls._default = cls()
                cache = cls._default
        return cache

    # -------------------------------- Loading --------------------------------
    def _ensure_loaded(self) -> None:
        if not self._load_builtin:
            return
        kinds = registered_kinds()
        if len(kinds) == len(self._loaded_kinds):
            return
        with self._lock:
            for kind in kinds:
                if kind.name in self._loaded_kinds:
                    continue
                count = 0
                for culture_name, unit, abbreviations in kind.localizations:
                    self._add(get_culture(culture_name), kind.unit_type, unit.value, abbreviations)
                    count += len(abbreviations)
                self._loaded_kinds = self._loaded_kinds | {kind.name}
                logger.debug("Loaded %d built-in abbreviations for %s", count, kind.name)

    def _add(self, culture: Culture, unit_type: type[Enum], unit_value, abbreviations) -> None:
        key = (culture.name, unit_type)
        lookup = self._lookups.get(key)
        if lookup is None:
            lookup = UnitValueAbbreviationLookup()
            lookups = dict(self._lookups)
            lookups[key] = lookup
            self._lookups = lookups
        lookup.add(unit_value, abbreviations)

    def _lookup(self, culture: Culture, unit_type: type[Enum]) -> UnitValueAbbreviationLookup | None:
        return self._lookups.get((culture.name, unit_type))

    def _chain(self, culture: str | Culture | None) -> tuple[Culture, ...]:
        resolved = get_culture(culture)
        if resolved.name == self.fallback_culture.name:
            return (resolved,)
        return (resolved, self.fallback_culture)

    # -------------------------------- Registration --------------------------------
    def register(
        self,
        unit_type: type[Enum],
        unit_value,
        culture: str | Culture | None,
        abbreviations: Iterable[str],
    ) -> None:
        """Add one or more abbreviations for a unit.

        Each abbreviation is appended to the unit's forward list and the unit
        value is appended to each abbreviation's reverse list. The first
        abbreviation ever registered for a unit is its default.

        Args:
            unit_type: The unit enum class.
            unit_value: Member of unit_type, or its numeric value.
            culture: Culture partition; None for the process default culture.
            abbreviations: Abbreviation strings to add.

        Raises:
            InvalidArgumentError: If unit_type is not an Enum class or
                unit_value is not one of its values.
            ArgumentNullError: If abbreviations is None.
        """
        value = self._unit_value(unit_type, unit_value)
        if abbreviations is None:
            raise ArgumentNullError("abbreviations")
        if isinstance(abbreviations, str):
            abbreviations = (abbreviations,)
        abbreviations = tuple(abbreviations)
        if not all(isinstance(a, str) for a in abbreviations):
            msg = "Abbreviations must be strings"
            raise InvalidArgumentError(msg)

        resolved = get_culture(culture)
        self._ensure_loaded()
        with self._lock:
            self._add(resolved, unit_type, value, abbreviations)
        logger.debug(
            "Registered %s for %s.%s in %s",
            abbreviations, unit_type.__name__, unit_type(value).name, resolved.name,
        )

    def map_unit_to_abbreviation(
        self, unit: Enum, *abbreviations: str, culture: str | Culture | None = None
    ) -> None:
        """Add abbreviations for a unit enum member.

        Example:
            >>> cache.map_unit_to_abbreviation(LengthUnit.FOOT, "feet", culture="en-US")
        """
        if not isinstance(unit, Enum):
            msg = f"Expected a unit enum member, got {type(unit).__name__}"
            raise InvalidArgumentError(msg)
        self.register(type(unit), unit, culture, abbreviations)

    @classmethod
    def _unit_value(cls, unit_type: type[Enum], unit_value):
        cls._unit_value_type_check(unit_type)
        if isinstance(unit_value, Enum):
            if not isinstance(unit_value, unit_type):
                msg = f"{unit_value!r} is not a {unit_type.__name__}"
                raise InvalidArgumentError(msg)
            return unit_value.value
        try:
            return unit_type(unit_value).value
        except ValueError:
            msg = f"{unit_value!r} is not a valid {unit_type.__name__} value"
            raise InvalidArgumentError(msg) from None

    # -------------------------------- Lookup --------------------------------
    def get_default_abbreviation(
        self, unit_type: type[Enum], unit_value, culture: str | Culture | None = None
    ) -> str:
        """Return the first abbreviation registered for a unit.

        Never raises for a missing translation: when neither the requested
        culture nor the fallback culture has an abbreviation, a placeholder
        naming the unit type and value is returned.

        Args:
            unit_type: The unit enum class.
            unit_value: Member of unit_type, or its numeric value.
            culture: Requested culture; None for the process default.

        Returns:
            str: The default abbreviation or the diagnostic placeholder.
        """
        value = self._unit_value(unit_type, unit_value)
        abbreviations = self.get_all_abbreviations(unit_type, value, culture)
        if abbreviations:
            return abbreviations[0]
        logger.warning(
            "No abbreviation for %s.%s in %s or %s",
            unit_type.__name__, unit_type(value).name, get_culture(culture).name,
            self.fallback_culture.name,
        )
        return f"(no abbreviation for {unit_type.__name__} with numeric value {value})"

    def get_all_abbreviations(
        self, unit_type: type[Enum], unit_value, culture: str | Culture | None = None
    ) -> list[str]:
        """Return every abbreviation of a unit, in registration order.

        Returns:
            list[str]: Abbreviations from the first culture in the fallback
            chain that has any; empty if none does.
        """
        value = self._unit_value(unit_type, unit_value)
        self._ensure_loaded()
        for candidate in self._chain(culture):
            lookup = self._lookup(candidate, unit_type)
            if lookup is None:
                continue
            abbreviations = lookup.get_abbreviations_for_unit(value)
            if abbreviations:
                return list(abbreviations)
        return []

    def get_units_for_abbreviation(
        self, unit_type: type[Enum], abbreviation: str, culture: str | Culture | None = None
    ) -> list:
        """Return the unit values an abbreviation denotes.

        Returns:
            list: Unit values (duplicates preserved) from the first culture in
            the fallback chain that knows the abbreviation; empty if none does.
        """
        self._unit_value_type_check(unit_type)
        if abbreviation is None:
            raise ArgumentNullError("abbreviation")
        self._ensure_loaded()
        for candidate in self._chain(culture):
            lookup = self._lookup(candidate, unit_type)
            if lookup is None:
                continue
            units = lookup.get_units_for_abbreviation(abbreviation)
            if units:
                return list(units)
        return []

    def get_all_abbreviations_for_type(
        self, unit_type: type[Enum], culture: str | Culture | None = None
    ) -> list[str]:
        """Return every abbreviation of every unit of a unit type.

        Returns:
            list[str]: Abbreviations of the first culture in the fallback chain
            that has data for unit_type; empty if none does.
        """
        self._unit_value_type_check(unit_type)
        self._ensure_loaded()
        for candidate in self._chain(culture):
            lookup = self._lookup(candidate, unit_type)
            if lookup is not None:
                return list(lookup.get_all_abbreviations())
        return []

    @staticmethod
    def _unit_value_type_check(unit_type: type[Enum]) -> None:
        if not (isinstance(unit_type, type) and issubclass(unit_type, Enum)):
            msg = "Must be an enum type"
            raise InvalidArgumentError(msg)


def default_abbreviation(unit: Enum, culture: str | Culture | None = None) -> str:
    """Return the default abbreviation of a unit enum member from the shared cache."""
    return UnitAbbreviationsCache.default().get_default_abbreviation(type(unit), unit, culture)


def map_unit_to_abbreviation(unit: Enum, *abbreviations: str, culture: str | Culture | None = None) -> None:
    """Register abbreviations for a unit enum member in the shared cache."""
    UnitAbbreviationsCache.default().map_unit_to_abbreviation(unit, *abbreviations, culture=culture)
