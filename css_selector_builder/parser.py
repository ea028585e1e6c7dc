from typing import Any, Dict, List, Optional, Tuple, Union
import json
import logging
from pathlib import Path

import tinycss2
from tinycss2.serializer import serialize_identifier, serialize_name
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as ModelValidationError

from .builder import Selector
from .exceptions import ParseError, ValidationError
from .validators import SelectorInfo, SelectorValidator
from .utils import is_valid_file_path, load_json_data

logger = logging.getLogger(__name__)

COMBINATOR_TOKENS = (">", "+", "~")

class CompoundSelectorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    element: Optional[str] = None
    id: Optional[str] = None
    classes: List[str] = Field(default_factory=list)
    attributes: List[str] = Field(default_factory=list)
    pseudo_classes: List[str] = Field(default_factory=list)
    pseudo_element: Optional[str] = None

    def build(self) -> Selector:
        selector = Selector()
        if self.element is not None:
            selector.element(self.element)
        if self.id is not None:
            selector.id(self.id)
        for name in self.classes:
            selector.class_(name)
        for fragment in self.attributes:
            selector.attr(fragment)
        for name in self.pseudo_classes:
            selector.pseudo_class(name)
        if self.pseudo_element is not None:
            selector.pseudo_element(self.pseudo_element)
        if not selector.stringify():
            raise ParseError("Selector description has a compound with no parts")
        return selector

class CombinationModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    left: "SelectorModel"
    combinator: str
    right: "SelectorModel"

    def build(self) -> Selector:
        return Selector.combine(self.left.build(), self.combinator, self.right.build())

SelectorModel = Union[CombinationModel, CompoundSelectorModel]
CombinationModel.model_rebuild()

_selector_model_adapter = TypeAdapter(SelectorModel)

class SelectorParser:
    """Builds Selectors from CSS text or from JSON descriptions."""

    def __init__(self, validator: Optional[SelectorValidator] = None):
        self.validator = validator or SelectorValidator()

    def parse(self, text: str) -> Selector:
        """
        Parse CSS selector text into a Selector.

        Compounds are built through the Selector append methods, so
        misordered or repeated parts raise the builder errors. Adjacent
        compounds are folded left to right with Selector.combine; a
        whitespace-only gap becomes the " " combinator.

        Raises:
            ParseError: On empty input, dangling combinators or tokens that
                are not part of a compound selector
        """
        if not text or not text.strip():
            raise ParseError("Empty selector")

        tokens = tinycss2.parse_component_value_list(text.strip(), skip_comments=True)
        compounds: List[Selector] = []
        combinators: List[str] = []
        current: Optional[Selector] = None
        gap = False

        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token.type == "whitespace":
                gap = current is not None
                i += 1
                continue

            if token.type == "literal" and token.value in COMBINATOR_TOKENS:
                if current is None:
                    raise ParseError(f"Unexpected combinator {token.value!r} in {text!r}")
                compounds.append(current)
                combinators.append(token.value)
                current, gap = None, False
                i += 1
                continue

            if current is not None and gap:
                compounds.append(current)
                combinators.append(" ")
                current = None
            if current is None:
                current, gap = Selector(), False
            i = self._apply_token(current, tokens, i)

        if current is None:
            if not compounds:
                raise ParseError("Empty selector")
            raise ParseError(f"Selector cannot end with a combinator: {text!r}")
        compounds.append(current)

        result = compounds[0]
        for combinator, compound in zip(combinators, compounds[1:]):
            result = Selector.combine(result, combinator, compound)
        return result

    def _apply_token(self, selector: Selector, tokens: List[Any], i: int) -> int:
        """Append the part starting at tokens[i]; return the next index."""
        token = tokens[i]

        if token.type == "ident":
            selector.element(serialize_identifier(token.value))
            return i + 1
        if token.type == "hash":
            selector.id(serialize_name(token.value))
            return i + 1
        if token.type == "[] block":
            selector.attr(_serialize_tokens(token.content).strip())
            return i + 1

        if token.type == "literal":
            if token.value == "*":
                selector.element("*")
                return i + 1
            if token.value == ".":
                name = _token_at(tokens, i + 1)
                if name is None or name.type != "ident":
                    raise ParseError("Expected a class name after '.'")
                selector.class_(serialize_identifier(name.value))
                return i + 2
            if token.value == ":":
                following = _token_at(tokens, i + 1)
                if following is not None and following.type == "literal" and following.value == ":":
                    selector.pseudo_element(_pseudo_name(_token_at(tokens, i + 2)))
                    return i + 3
                selector.pseudo_class(_pseudo_name(following))
                return i + 2

        raise ParseError(f"Unexpected token {token.serialize()!r}")

    def parse_data(self, data: Dict[str, Any]) -> Selector:
        """Build a Selector from a compound or combination description."""
        try:
            model = _selector_model_adapter.validate_python(data)
        except ModelValidationError as e:
            logger.debug(f"Selector description rejected: {e}")
            raise ParseError(f"Invalid selector description: {str(e)}") from e

        return model.build()

    def parse_json_string(self, json_string: str) -> Selector:
        """Build a Selector from a JSON description string."""
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON string: {str(e)}") from e
        if not isinstance(data, dict):
            raise ParseError(f"Expected a JSON object, got {type(data).__name__}")
        return self.parse_data(data)

    def parse_json_file(self, file_path: Union[str, Path]) -> Selector:
        """Build a Selector from a JSON description file."""
        if not is_valid_file_path(file_path):
            raise ParseError(f"Invalid or non-existent file: {file_path}")
        try:
            data = load_json_data(file_path)
        except ValidationError as e:
            raise ParseError(f"Error loading JSON file: {str(e)}") from e
        return self.parse_data(data)

    def parse_and_validate(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> Tuple[Selector, SelectorInfo]:
        """
        Parse a selector from any supported source and validate it.

        Args:
            source: Description dict, path to a JSON file, JSON object
                string or CSS selector text

        Returns:
            Tuple of (selector, validation info)
        """
        if isinstance(source, dict):
            selector = self.parse_data(source)
        elif isinstance(source, Path) or is_valid_file_path(source):
            selector = self.parse_json_file(source)
        elif source.lstrip().startswith("{"):
            selector = self.parse_json_string(source)
        else:
            selector = self.parse(source)
        return selector, self.validator.validate(selector)

def _token_at(tokens: List[Any], index: int) -> Optional[Any]:
    return tokens[index] if index < len(tokens) else None

def _pseudo_name(token: Optional[Any]) -> str:
    if token is None:
        raise ParseError("Expected a pseudo-class or pseudo-element name after ':'")
    if token.type == "ident":
        return serialize_identifier(token.value)
    if token.type == "function":
        return f"{serialize_identifier(token.name)}({_serialize_tokens(token.arguments)})"
    raise ParseError(f"Unexpected token {token.serialize()!r} after ':'")

def _serialize_tokens(tokens: List[Any]) -> str:
    # Token by token: tinycss2.serialize() would insert /**/ between some pairs.
    return "".join(token.serialize() for token in tokens)
