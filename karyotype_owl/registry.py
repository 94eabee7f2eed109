"""Structural records for every class declared by the band builders."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from .errors import BandSyntaxError, UnrecognizedBandSyntax


class EntityKind(Enum):
    ROOT = "root"
    CHROMOSOME = "chromosome"
    BAND_GROUP = "band_group"
    ARM = "arm"
    BAND = "band"
    CENTROMERE = "centromere"
    TELOMERE = "telomere"


@dataclass(frozen=True)
class EntityRecord:
    """What a declared class is, independent of how its name was spelled.

    ``chromosome`` is the chromosome class local name (``HumanChromosome1``),
    ``arm`` is ``"p"``, ``"q"`` or ``None`` and ``path`` lists the container
    labels enclosing a band, outermost first.
    """

    name: str
    kind: EntityKind
    chromosome: Optional[str] = None
    arm: Optional[str] = None
    path: Tuple[str, ...] = ()


class EntityRegistry:
    def __init__(self) -> None:
        self._records: Dict[str, EntityRecord] = {}

    def register(self, record: EntityRecord) -> EntityRecord:
        if record.name in self._records:
            raise BandSyntaxError(record.name, f"Band declared twice: {record.name!r}")
        self._records[record.name] = record
        return record

    def get(self, name: str) -> Optional[EntityRecord]:
        return self._records.get(name)

    def require(self, name: str) -> EntityRecord:
        record = self._records.get(name)
        if record is None:
            raise UnrecognizedBandSyntax(f"Band not recognized: {name}")
        return record

    def __contains__(self, name: str) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def records(
        self, kind: Optional[EntityKind] = None, chromosome: Optional[str] = None
    ) -> Iterator[EntityRecord]:
        for record in self._records.values():
            if kind is not None and record.kind is not kind:
                continue
            if chromosome is not None and record.chromosome != chromosome:
                continue
            yield record

    def telomere_of(self, chromosome: str, arm: Optional[str] = None) -> EntityRecord:
        """Return the telomere terminating ``arm`` (or the chromosome as a whole)."""

        for record in self.records(EntityKind.TELOMERE, chromosome):
            if record.arm == arm:
                return record
        where = f"{chromosome} arm {arm}" if arm else chromosome
        raise UnrecognizedBandSyntax(f"No telomere declared for {where}")

    def summary(self) -> Dict[str, int]:
        counts = Counter(record.kind.value for record in self._records.values())
        return dict(sorted(counts.items()))


__all__ = ["EntityKind", "EntityRecord", "EntityRegistry"]
