"""
Small object and collection exercises.

Dicts stand in for plain objects throughout. None of these functions depend
on the selector builder.
"""
from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Type, TypeVar
from dataclasses import dataclass
from types import MappingProxyType
import json

from pydantic import BaseModel

T = TypeVar("T")

TICKET_PRICE = 25

def shallow_copy(obj: Dict[str, Any]) -> Dict[str, Any]:
    return dict(obj)

def merge_objects(objects: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Merge dicts into one, summing the values of overlapping keys.

    merge_objects([{"a": 1, "b": 2}, {"b": 3, "c": 5}]) => {"a": 1, "b": 5, "c": 5}
    """
    merged: Dict[str, Any] = {}
    for obj in objects:
        for key, value in obj.items():
            merged[key] = merged[key] + value if key in merged else value
    return merged

def remove_properties(obj: Dict[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """Remove keys from obj in place and return it. Missing keys are ignored."""
    for key in keys:
        obj.pop(key, None)
    return obj

def compare_objects(obj1: Mapping[str, Any], obj2: Mapping[str, Any]) -> bool:
    return obj1 == obj2

def is_empty_object(obj: Mapping[str, Any]) -> bool:
    return len(obj) == 0

def make_immutable(obj: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only view of a snapshot of obj."""
    return MappingProxyType(dict(obj))

def make_word(letters: Mapping[str, Iterable[int]]) -> str:
    """
    Build a word from letters mapped to the positions they occupy.

    make_word({"a": [0, 1], "b": [2, 3], "c": [4, 5]}) => "aabbcc"
    """
    positions = {
        position: letter
        for letter, indexes in letters.items()
        for position in indexes
    }
    if not positions:
        return ""
    return "".join(positions.get(i, "") for i in range(max(positions) + 1))

def sell_tickets(queue: Iterable[int]) -> bool:
    """
    Return True if every customer in queue can be sold a ticket with change.

    Tickets cost 25 and customers pay with 25, 50 or 100 bills. The seller
    starts with no change and serves the queue strictly in order.
    """
    twenty_fives = 0
    fifties = 0
    for bill in queue:
        if bill == TICKET_PRICE:
            twenty_fives += 1
        elif bill == 50:
            if not twenty_fives:
                return False
            twenty_fives -= 1
            fifties += 1
        elif bill == 100:
            # 50 + 25 first, then 3 x 25
            if fifties and twenty_fives:
                fifties -= 1
                twenty_fives -= 1
            elif twenty_fives >= 3:
                twenty_fives -= 3
            else:
                return False
        else:
            return False
    return True

@dataclass
class Rectangle:
    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height

def get_json(obj: Any) -> str:
    """Compact JSON, e.g. {"height": 10, "width": 20} => '{"height":10,"width":20}'."""
    if isinstance(obj, BaseModel):
        return obj.model_dump_json()
    return json.dumps(obj, separators=(",", ":"))

def from_json(cls: Type[T], json_string: str) -> T:
    """
    Create an instance of cls from its JSON representation.

    Pydantic models are validated; other classes get the decoded fields set
    as attributes without running __init__.
    """
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return cls.model_validate_json(json_string)
    instance = cls.__new__(cls)
    instance.__dict__.update(json.loads(json_string))
    return instance

def sort_cities_array(cities: List[Dict[str, str]]) -> List[Dict[str, str]]:
    """
    Sort in place by country, then city, ascending; returns the list.

    Names compare case-insensitively first, so "amsterdam" sorts before
    "Berlin"; exact spelling only breaks ties.
    """
    cities.sort(key=lambda item: (
        item["country"].casefold(), item["country"],
        item["city"].casefold(), item["city"]
    ))
    return cities

def group(
    items: Iterable[T],
    key_selector: Callable[[T], Hashable],
    value_selector: Callable[[T], Any]
) -> Dict[Hashable, List[Any]]:
    """Multimap of key_selector(item) to value_selector(item), in first-seen key order."""
    grouped: Dict[Hashable, List[Any]] = {}
    for item in items:
        grouped.setdefault(key_selector(item), []).append(value_selector(item))
    return grouped
