"""CatalogEntry: a purchasable grocery item with a fixed package size and price."""
import re
from typing import Tuple

_SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-zA-Z][a-zA-Z ]*)?\s*$")


def parse_package_size(text: str) -> Tuple[float, str]:
    '''
    Splits a package size such as "2 lb", "500ml" or "12 count" into (2.0, "lb").
    Returns (0.0, "") when the text carries no leading number.
    '''
    m = _SIZE_PATTERN.match(text or "")
    if not m:
        return 0.0, ""
    return float(m.group(1)), (m.group(2) or "").strip().lower()


class CatalogEntry:
    __slots__ = ("name", "category", "package_description", "package_size",
                 "package_size_unit", "unit_price", "unit")

    def __init__(self, name: str, category: str, package_description: str,
                 package_size: float, package_size_unit: str, unit_price: float, unit: str):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "category", category)
        object.__setattr__(self, "package_description", package_description)
        object.__setattr__(self, "package_size", float(package_size))
        object.__setattr__(self, "package_size_unit", (package_size_unit or "").strip().lower())
        object.__setattr__(self, "unit_price", float(unit_price))
        object.__setattr__(self, "unit", (unit or "").strip().lower())

    def __setattr__(self, key, value):
        raise AttributeError("CatalogEntry is read-only")

    def _astuple(self):
        return tuple(getattr(self, f) for f in self.__slots__)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CatalogEntry):
            return NotImplemented
        return self._astuple() == other._astuple()

    def __hash__(self) -> int:
        return hash(self._astuple())

    def __str__(self) -> str:
        return f"{self.name} - {self.package_description} - ${self.unit_price:.2f}/{self.unit}"

    __repr__ = __str__

    @property
    def size_label(self) -> str:
        size = int(self.package_size) if self.package_size.is_integer() else self.package_size
        return f"{size} {self.package_size_unit}".strip()

    @staticmethod
    def from_dict(data):
        '''
        Builds an entry from the catalog JSON. "package_size" may be a structured
        {"quantity", "unit"} object or a plain string like "2 lb".
        '''
        d = dict(data)
        size = d.get("package_size")
        if isinstance(size, dict):
            size_qty, size_unit = size.get("quantity", 0), size.get("unit", "")
        else:
            size_qty, size_unit = parse_package_size(str(size or ""))
        return CatalogEntry(
            name=d["name"],
            category=d.get("category", ""),
            package_description=d.get("package_description") or d.get("standard_package", ""),
            package_size=size_qty,
            package_size_unit=size_unit,
            unit_price=d.get("unit_price", d.get("estimated_price", 0)),
            unit=d.get("unit", ""),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "category": self.category,
            "package_description": self.package_description,
            "package_size": {"quantity": self.package_size, "unit": self.package_size_unit},
            "unit_price": self.unit_price,
            "unit": self.unit,
        }
