from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet


class Relation(Enum):
	"""Named relationships between two canonical paths."""

	EQUAL = "equal"
	DESCENDANT = "descendant"
	ANCESTOR = "ancestor"
	SIBLING = "sibling"


@dataclass(frozen=True, slots=True)
class RelationReport:
	"""
	Result of evaluating every predicate for one (subject, other) pair.
	`subject` and `other` hold the canonical forms the predicates compared.
	"""
	subject: str
	other: str
	equal: bool
	descendant: bool
	ancestor: bool
	sibling: bool

	@property
	def relations(self) -> FrozenSet[Relation]:
		return frozenset(r for r in Relation if getattr(self, r.value))

	def to_dict(self) -> Dict[str, Any]:
		return {
			"subject": self.subject,
			"other": self.other,
			**{r.value: getattr(self, r.value) for r in Relation},
		}
