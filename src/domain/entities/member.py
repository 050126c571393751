"""Member domain entities."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from core.exceptions import ValidationError


class AttributeValues(Mapping[str, str]):
    """String values keyed by attribute definition id.

    Keys that no longer match a definition are kept as they are. Absence is
    explicit: ``lookup`` returns ``None`` for a missing key, while an empty
    string is a real value.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        cleaned: dict[str, str] = {}
        for key, value in (values or {}).items():
            if not isinstance(key, str) or not key:
                raise ValidationError(
                    "Attribute keys must be non-empty strings",
                    details={"key": repr(key)},
                )
            if not isinstance(value, str):
                raise ValidationError(
                    f"Attribute value for '{key}' must be a string",
                    details={"key": key},
                )
            cleaned[key] = value
        self._values = cleaned

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"AttributeValues({self._values!r})"

    def lookup(self, definition_id: str) -> str | None:
        """Value for ``definition_id``, or ``None`` when unset."""
        return self._values.get(definition_id)

    def merged(self, patch: Mapping[str, str]) -> "AttributeValues":
        """Shallow merge: keys in ``patch`` win, other keys are untouched."""
        return AttributeValues({**self._values, **patch})


@dataclass
class Member:
    """Domain entity for a person on the roster."""

    id: str
    first_name: str
    last_name: str
    attributes: AttributeValues = field(default_factory=AttributeValues)

    def __post_init__(self) -> None:
        if not isinstance(self.attributes, AttributeValues):
            self.attributes = AttributeValues(self.attributes)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on names and attribute values."""
        needle = term.lower()
        if needle in self.first_name.lower() or needle in self.last_name.lower():
            return True
        return any(needle in str(value).lower() for value in self.attributes.values())
