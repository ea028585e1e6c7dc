from enum import Enum
from typing import Dict, List, Optional, Tuple

from .exceptions import (
    CombinedSelectorError,
    DuplicatePartError,
    OrderViolationError,
)

class PartKind(Enum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

PART_ORDER: Dict[PartKind, int] = {
    PartKind.ELEMENT: 0,
    PartKind.ID: 1,
    PartKind.CLASS: 2,
    PartKind.ATTRIBUTE: 3,
    PartKind.PSEUDO_CLASS: 4,
    PartKind.PSEUDO_ELEMENT: 5,
}

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)

class Selector:
    """
    A compound CSS selector built by chained append calls.

    Each append returns the same instance. Parts must be appended in
    PART_ORDER; element, id and pseudo-element may be set once.
    Instances produced by combine() only hold their rendered string.
    """

    def __init__(self):
        self.element_tag: Optional[str] = None
        self.id_value: Optional[str] = None
        self.class_names: List[str] = []
        self.attributes: List[str] = []
        self.pseudo_classes: List[str] = []
        self.pseudo_element_name: Optional[str] = None
        self.last_part_rank = -1
        self.is_combined = False
        self.precomputed: Optional[str] = None
        self.combinators: Tuple[str, ...] = ()

    @classmethod
    def combine(cls, left: "Selector", combinator: str, right: "Selector") -> "Selector":
        """Join two selectors with a combinator token, inserted verbatim."""
        result = cls()
        result.precomputed = f"{left.stringify()} {combinator} {right.stringify()}"
        result.combinators = left.combinators + (combinator,) + right.combinators
        result.is_combined = True
        return result

    def _check_order(self, kind: PartKind) -> None:
        if self.is_combined:
            raise CombinedSelectorError(
                f"Cannot append {kind.value} to a combined selector"
            )
        rank = PART_ORDER[kind]
        if rank < self.last_part_rank:
            raise OrderViolationError(ORDER_MESSAGE)
        self.last_part_rank = rank

    def element(self, tag: str) -> "Selector":
        if self.element_tag is not None:
            raise DuplicatePartError(DUPLICATE_MESSAGE)
        self._check_order(PartKind.ELEMENT)
        self.element_tag = tag
        return self

    def id(self, value: str) -> "Selector":
        if self.id_value is not None:
            raise DuplicatePartError(DUPLICATE_MESSAGE)
        self._check_order(PartKind.ID)
        self.id_value = value
        return self

    def class_(self, name: str) -> "Selector":
        self._check_order(PartKind.CLASS)
        self.class_names.append(name)
        return self

    def attr(self, fragment: str) -> "Selector":
        self._check_order(PartKind.ATTRIBUTE)
        self.attributes.append(fragment)
        return self

    def pseudo_class(self, name: str) -> "Selector":
        self._check_order(PartKind.PSEUDO_CLASS)
        self.pseudo_classes.append(name)
        return self

    def pseudo_element(self, name: str) -> "Selector":
        if self.pseudo_element_name is not None:
            raise DuplicatePartError(DUPLICATE_MESSAGE)
        self._check_order(PartKind.PSEUDO_ELEMENT)
        self.pseudo_element_name = name
        return self

    def stringify(self) -> str:
        """Render the selector; repeated calls return the same string."""
        if self.is_combined:
            return self.precomputed

        result = ""
        if self.element_tag is not None:
            result += self.element_tag
        if self.id_value is not None:
            result += f"#{self.id_value}"
        result += "".join(f".{name}" for name in self.class_names)
        result += "".join(f"[{fragment}]" for fragment in self.attributes)
        result += "".join(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element_name is not None:
            result += f"::{self.pseudo_element_name}"
        return result

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"Selector({self.stringify()!r})"

class CssSelectorBuilder:
    """Facade creating a fresh Selector per call."""

    def element(self, tag: str) -> Selector:
        return Selector().element(tag)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, name: str) -> Selector:
        return Selector().class_(name)

    def attr(self, fragment: str) -> Selector:
        return Selector().attr(fragment)

    def pseudo_class(self, name: str) -> Selector:
        return Selector().pseudo_class(name)

    def pseudo_element(self, name: str) -> Selector:
        return Selector().pseudo_element(name)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        return Selector.combine(left, combinator, right)

css_selector_builder = CssSelectorBuilder()
