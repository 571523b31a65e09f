"""Random fantasy name generator.

Produces names like 'Frodo Boffin' by pairing a first name from a
gender-keyed pool with a surname.
"""
from __future__ import annotations

import hashlib
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, TypeVar, Union

logger = logging.getLogger("randompeople.names")

T = TypeVar("T")


class InvalidArgument(ValueError):
    """Raised for arguments no name can be generated from."""


class NameCategory(str, Enum):
    FEMALE = "female"
    MALE = "male"
    SURNAMES = "surnames"

    @classmethod
    def parse(cls, value: Union[str, "NameCategory"]) -> "NameCategory":
        """Strict lookup: unknown tags raise instead of mapping to an empty pool."""
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidArgument(f"unknown name category: {value!r}") from exc


GENDERS = (NameCategory.MALE, NameCategory.FEMALE)

NAME_POOLS: dict[NameCategory, tuple[str, ...]] = {
    NameCategory.FEMALE: ("Berthefried", "Tatiana", "Hildeburg", "Lily", "Daisy"),
    NameCategory.MALE: ("Bilbo", "Frodo", "Theodulph", "Lotho"),
    NameCategory.SURNAMES: ("Baggins", "Lightfoot", "Boulderhill", "Brockhouse", "Boffin"),
}


@dataclass(frozen=True)
class GeneratedName:
    first: str
    last: str
    gender: NameCategory

    @property
    def full(self) -> str:
        return f"{self.first} {self.last}"

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.full,
            "first": self.first,
            "last": self.last,
            "gender": self.gender.value,
        }


def fetch_names(category: Union[str, NameCategory]) -> tuple[str, ...]:
    """Return the fixed pool for a category tag.

    Unknown tags return an empty tuple rather than raising.
    """
    try:
        key = NameCategory(category)
    except ValueError:
        logger.debug("No name pool for category %r", category)
        return ()
    return NAME_POOLS[key]


def pick_random(items: Sequence[T], rng: Optional[random.Random] = None) -> T:
    """Pick one element uniformly at random."""
    if not items:
        raise InvalidArgument("cannot pick from an empty sequence")
    source = rng or random
    return items[int(source.random() * len(items))]


def _rng_for_seed(seed: str) -> random.Random:
    h = int(hashlib.md5(seed.encode()).hexdigest(), 16)
    return random.Random(h)


def _resolve_gender(
    gender: Union[str, NameCategory, None],
    rng: Optional[random.Random],
) -> NameCategory:
    if not gender:
        return pick_random(GENDERS, rng)
    resolved = NameCategory.parse(gender)
    if resolved not in GENDERS:
        raise InvalidArgument(f"gender must be 'male' or 'female', got {gender!r}")
    return resolved


def generate_full_name(
    gender: Union[str, NameCategory, None] = None,
    *,
    seed: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> GeneratedName:
    """Generate a name and return its parts.

    If seed is provided, the name is deterministic for that seed.
    Otherwise ``rng`` (or the module-level random source) is used.
    """
    if seed:
        rng = _rng_for_seed(seed)
    resolved = _resolve_gender(gender, rng)
    first = pick_random(fetch_names(resolved), rng)
    last = pick_random(fetch_names(NameCategory.SURNAMES), rng)
    return GeneratedName(first=first, last=last, gender=resolved)


def generate_name(
    gender: Union[str, NameCategory, None] = None,
    *,
    seed: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Generate a name like 'Lily Brockhouse'.

    ``gender`` is 'male' or 'female'; when omitted one is picked at random.
    """
    return generate_full_name(gender, seed=seed, rng=rng).full


def generate_names(
    count: int,
    gender: Union[str, NameCategory, None] = None,
    *,
    seed: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> list[GeneratedName]:
    """Generate ``count`` names from a single random source. Repeats are allowed."""
    if count < 0:
        raise InvalidArgument(f"count must be >= 0, got {count}")
    if seed:
        rng = _rng_for_seed(seed)
    return [generate_full_name(gender, rng=rng) for _ in range(count)]
