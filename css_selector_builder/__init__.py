# css_selector_builder/__init__.py
from .builder import Selector, PartKind, PART_ORDER, CssSelectorBuilder, css_selector_builder
from .parser import SelectorParser, CompoundSelectorModel, CombinationModel
from .validators import SelectorValidator, SelectorInfo, KNOWN_COMBINATORS
from .exceptions import (
    SelectorBuilderError,
    DuplicatePartError,
    OrderViolationError,
    CombinedSelectorError,
    ValidationError,
    InvalidSelectorError,
    InvalidHTMLError,
    ParseError
)
from .utils import is_valid_file_path, load_json_data
from .objects import (
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

__version__ = "0.1.0"

__all__ = [
    # Builder
    "Selector",
    "PartKind",
    "PART_ORDER",
    "CssSelectorBuilder",
    "css_selector_builder",

    # Parsing and validation
    "SelectorParser",
    "CompoundSelectorModel",
    "CombinationModel",
    "SelectorValidator",
    "SelectorInfo",
    "KNOWN_COMBINATORS",

    # Exceptions
    "SelectorBuilderError",
    "DuplicatePartError",
    "OrderViolationError",
    "CombinedSelectorError",
    "ValidationError",
    "InvalidSelectorError",
    "InvalidHTMLError",
    "ParseError",

    # Utility functions
    "is_valid_file_path",
    "load_json_data",

    # Object exercises
    "shallow_copy",
    "merge_objects",
    "remove_properties",
    "compare_objects",
    "is_empty_object",
    "make_immutable",
    "make_word",
    "sell_tickets",
    "Rectangle",
    "get_json",
    "from_json",
    "sort_cities_array",
    "group"
]
