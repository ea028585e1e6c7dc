import pytest
from dataclasses import dataclass
from pydantic import BaseModel

from css_selector_builder.objects import (
    shallow_copy,
    merge_objects,
    remove_properties,
    compare_objects,
    is_empty_object,
    make_immutable,
    make_word,
    sell_tickets,
    Rectangle,
    get_json,
    from_json,
    sort_cities_array,
    group
)

def test_shallow_copy():
    nested = {"a": [1, 2, 3]}
    original = {"a": 2, "b": nested}
    copy = shallow_copy(original)
    assert copy == original
    assert copy is not original
    assert copy["b"] is nested
    assert shallow_copy({}) == {}

def test_merge_objects():
    assert merge_objects([{"a": 1, "b": 2}, {"b": 3, "c": 5}]) == {"a": 1, "b": 5, "c": 5}
    assert merge_objects([{"a": 1}, {"a": 2}, {"a": 3}]) == {"a": 6}
    assert merge_objects([]) == {}

def test_remove_properties():
    obj = {"a": 1, "b": 2, "c": 3}
    assert remove_properties(obj, ["b", "c"]) is obj
    assert obj == {"a": 1}
    assert remove_properties({"a": 1, "b": 2}, ["d", "e"]) == {"a": 1, "b": 2}
    assert remove_properties({"a": 0, "b": None}, ["a", "b"]) == {}

def test_compare_objects():
    assert compare_objects({"a": 1, "b": 2}, {"a": 1, "b": 2}) is True
    assert compare_objects({"a": 1, "b": 2}, {"a": 1, "b": 3}) is False

def test_is_empty_object():
    assert is_empty_object({}) is True
    assert is_empty_object({"a": 1}) is False

def test_make_immutable():
    immutable = make_immutable({"a": 1, "b": 2})
    with pytest.raises(TypeError):
        immutable["a"] = 5
    with pytest.raises(TypeError):
        del immutable["a"]
    with pytest.raises(TypeError):
        immutable["new"] = "new"
    assert dict(immutable) == {"a": 1, "b": 2}

def test_make_word():
    assert make_word({"a": [0, 1], "b": [2, 3], "c": [4, 5]}) == "aabbcc"
    assert make_word({
        "H": [0], "e": [1], "l": [2, 3, 8], "o": [4, 6], "W": [5], "r": [7], "d": [9]
    }) == "HelloWorld"
    assert make_word({}) == ""

@pytest.mark.parametrize("queue, expected", [
    ([25, 25, 50], True),
    ([25, 100], False),
    ([25, 50, 100], True),
    ([25, 25, 25, 100], True),
    ([25, 25, 50, 50, 100], False),
    ([50], False),
    ([100, 25], False),
    ([25, 25, 50, 100, 50], False),
    ([], True),
])
def test_sell_tickets(queue, expected):
    assert sell_tickets(queue) is expected

def test_rectangle():
    rectangle = Rectangle(10, 20)
    assert rectangle.width == 10
    assert rectangle.height == 20
    assert rectangle.get_area() == 200

def test_get_json():
    assert get_json([1, 2, 3]) == "[1,2,3]"
    assert get_json({"height": 10, "width": 20}) == '{"height":10,"width":20}'

@dataclass
class Circle:
    radius: float

    def get_diameter(self):
        return self.radius * 2

class Point(BaseModel):
    x: int
    y: int

def test_from_json_plain_class():
    circle = from_json(Circle, '{"radius": 10}')
    assert isinstance(circle, Circle)
    assert circle.radius == 10
    assert circle.get_diameter() == 20

def test_from_json_round_trip():
    rectangle = from_json(Rectangle, get_json({"width": 10, "height": 20}))
    assert rectangle.get_area() == 200

def test_from_json_pydantic_model():
    point = from_json(Point, get_json(Point(x=1, y=2)))
    assert point == Point(x=1, y=2)

def test_sort_cities_array():
    cities = [
        {"country": "Russia", "city": "Moscow"},
        {"country": "Belarus", "city": "Minsk"},
        {"country": "Poland", "city": "Warsaw"},
        {"country": "Russia", "city": "Saint Petersburg"},
        {"country": "Poland", "city": "Krakow"},
        {"country": "Belarus", "city": "Brest"},
    ]
    assert sort_cities_array(cities) == [
        {"country": "Belarus", "city": "Brest"},
        {"country": "Belarus", "city": "Minsk"},
        {"country": "Poland", "city": "Krakow"},
        {"country": "Poland", "city": "Warsaw"},
        {"country": "Russia", "city": "Moscow"},
        {"country": "Russia", "city": "Saint Petersburg"},
    ]

def test_group():
    items = [
        {"country": "Belarus", "city": "Brest"},
        {"country": "Russia", "city": "Omsk"},
        {"country": "Russia", "city": "Samara"},
        {"country": "Belarus", "city": "Grodno"},
        {"country": "Belarus", "city": "Minsk"},
        {"country": "Poland", "city": "Lodz"},
    ]
    grouped = group(items, lambda item: item["country"], lambda item: item["city"])
    assert grouped == {
        "Belarus": ["Brest", "Grodno", "Minsk"],
        "Russia": ["Omsk", "Samara"],
        "Poland": ["Lodz"],
    }
    assert list(grouped) == ["Belarus", "Russia", "Poland"]

def test_sort_cities_array_ignores_case_first():
    cities = [
        {"country": "belarus", "city": "Minsk"},
        {"country": "Belarus", "city": "brest"},
        {"country": "austria", "city": "Vienna"},
        {"country": "Belarus", "city": "Grodno"},
    ]
    assert sort_cities_array(cities) == [
        {"country": "austria", "city": "Vienna"},
        {"country": "Belarus", "city": "brest"},
        {"country": "Belarus", "city": "Grodno"},
        {"country": "belarus", "city": "Minsk"},
    ]

def test_object_exercises_exported_from_package():
    import css_selector_builder

    assert css_selector_builder.sell_tickets is sell_tickets
    assert css_selector_builder.Rectangle is Rectangle
    assert "group" in css_selector_builder.__all__
