from typing import FrozenSet, List, Union
from dataclasses import dataclass
import logging

from lxml import html, etree
import cssselect

from .builder import Selector
from .exceptions import InvalidSelectorError, InvalidHTMLError

logger = logging.getLogger(__name__)

KNOWN_COMBINATORS: FrozenSet[str] = frozenset({" ", ">", "+", "~"})

@dataclass
class SelectorInfo:
    selector: str
    is_valid: bool
    message: str = ""
    specificity: tuple = (0, 0, 0)

class SelectorValidator:
    """Checks built selectors with cssselect and runs them against HTML."""

    def __init__(self, strict_combinators: bool = False):
        self.strict_combinators = strict_combinators

    def validate(self, selector: Union[Selector, str]) -> SelectorInfo:
        """
        Validate a selector and compute its specificity.

        Args:
            selector: A built Selector or raw selector text

        Returns:
            SelectorInfo; syntax problems are reported with is_valid=False

        Raises:
            InvalidSelectorError: If the selector renders to an empty string
        """
        text = _selector_text(selector)
        if not text.strip():
            raise InvalidSelectorError("Empty selector")

        if self.strict_combinators and isinstance(selector, Selector):
            unknown = [c for c in selector.combinators if c not in KNOWN_COMBINATORS]
            if unknown:
                return SelectorInfo(
                    selector=text,
                    is_valid=False,
                    message=f"Unknown combinator(s): {', '.join(repr(c) for c in unknown)}"
                )

        try:
            parsed = cssselect.parse(text)
        except cssselect.SelectorSyntaxError as e:
            logger.debug(f"Selector {text!r} failed to parse: {e}")
            return SelectorInfo(selector=text, is_valid=False, message=f"Invalid CSS selector: {str(e)}")

        if len(parsed) != 1:
            return SelectorInfo(
                selector=text,
                is_valid=False,
                message="Selector groups are not supported"
            )

        return SelectorInfo(
            selector=text,
            is_valid=True,
            specificity=parsed[0].specificity()
        )

    def find_matches(
        self,
        html_content: str,
        selector: Union[Selector, str]
    ) -> List[html.HtmlElement]:
        """Return the elements of html_content matched by selector."""
        if not html_content or not isinstance(html_content, str) or not html_content.strip():
            raise InvalidHTMLError("Empty HTML content")

        try:
            tree = html.fromstring(html_content)
        except (etree.ParserError, etree.XMLSyntaxError) as e:
            raise InvalidHTMLError(f"Error parsing HTML: {str(e)}") from e

        text = _selector_text(selector)
        try:
            return tree.cssselect(text)
        except cssselect.SelectorError as e:
            raise InvalidSelectorError(f"Cannot evaluate selector {text!r}: {str(e)}") from e

def _selector_text(selector: Union[Selector, str]) -> str:
    if isinstance(selector, Selector):
        return selector.stringify()
    if not isinstance(selector, str):
        raise InvalidSelectorError(f"Unsupported selector type: {type(selector).__name__}")
    return selector
