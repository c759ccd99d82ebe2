from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

UNKNOWN_NAME = "Unknown Individual"
UNKNOWN_VALUE = "Unknown"

SEX = "Sex"
BIRTH = "Birth"


@dataclass(slots=True)
class BirthDetails:
    """
    BIRT substructure of an individual.

    Both fields start as ``"Unknown"`` and are overwritten by the ``2 DATE``
    and ``2 PLAC`` lines that follow the ``1 BIRT`` line.
    """
    date: str = UNKNOWN_VALUE
    place: str = UNKNOWN_VALUE


@dataclass(slots=True)
class IndividualRecord:
    """
    One INDI record from a single GEDCOM file.

    ``id`` is the file-local xref without its ``@`` delimiters. It identifies
    the record inside its own file only and plays no part in matching.

    ``details`` holds the recognized detail kinds, in the order they were
    first seen: ``"Sex"`` -> str and ``"Birth"`` -> BirthDetails.
    """
    id: str
    name: str = UNKNOWN_NAME
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def sex(self) -> Optional[str]:
        return self.details.get(SEX)

    @property
    def birth(self) -> Optional[BirthDetails]:
        return self.details.get(BIRTH)

    def to_dict(self) -> Dict[str, Any]:
        details: Dict[str, Any] = {}
        for kind, value in self.details.items():
            if isinstance(value, BirthDetails):
                details[kind] = {"date": value.date, "place": value.place}
            else:
                details[kind] = value
        return {"id": self.id, "name": self.name, "details": details}
