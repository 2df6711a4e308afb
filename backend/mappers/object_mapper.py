"""
Declarative object mapper.

A MappingRule lists which attribute of the source type feeds which keyword of
the target type's constructor. Rules are registered once on an ObjectMapper,
optionally together with their reverse, and looked up by (source, target)
type pair at mapping time.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple, Type, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class MappingRule:
    """Field correspondence from one type to another."""

    source: type
    target: type
    fields: Tuple[Tuple[str, str], ...]

    def apply(self, obj: Any) -> Any:
        """Build a target instance from obj."""
        values = {target_field: getattr(obj, source_field) for source_field, target_field in self.fields}
        return self.target(**values)

    def reversed(self) -> "MappingRule":
        return MappingRule(
            source=self.target,
            target=self.source,
            fields=tuple((target_field, source_field) for source_field, target_field in self.fields),
        )


class ObjectMapper:
    """Registry of mapping rules keyed by (source type, target type)."""

    def __init__(self):
        self._rules: Dict[Tuple[type, type], MappingRule] = {}

    def register(
        self,
        source: type,
        target: type,
        fields: Iterable[str | Tuple[str, str]],
        reverse_map: bool = False,
    ) -> "ObjectMapper":
        """
        Register a mapping rule.

        Args:
            source: Type mapped from
            target: Type mapped to
            fields: Attribute names shared by both types, or (source, target) pairs
            reverse_map: Also register the target -> source rule

        Returns:
            The mapper, so registrations can be chained
        """
        pairs = tuple(
            (field, field) if isinstance(field, str) else (field[0], field[1])
            for field in fields
        )
        rule = MappingRule(source=source, target=target, fields=pairs)
        self._rules[(source, target)] = rule
        if reverse_map:
            reverse = rule.reversed()
            self._rules[(reverse.source, reverse.target)] = reverse
        return self

    def has_rule(self, source: type, target: type) -> bool:
        return (source, target) in self._rules

    def map(self, obj: Any, target: Type[T]) -> T:
        """
        Map obj to an instance of target.

        Raises:
            LookupError: If no rule is registered for the type pair
        """
        rule = self._rules.get((type(obj), target))
        if rule is None:
            raise LookupError(f"No mapping registered from {type(obj).__name__} to {target.__name__}")
        return rule.apply(obj)

    def map_all(self, items: Iterable[Any], target: Type[T]) -> list[T]:
        return [self.map(item, target) for item in items]
