import pytest
from css_selector_builder import CssSelectorBuilder, SelectorParser, SelectorValidator

@pytest.fixture
def builder():
    """Return a selector builder facade."""
    return CssSelectorBuilder()

@pytest.fixture
def validator():
    """Return a SelectorValidator with default settings."""
    return SelectorValidator()

@pytest.fixture
def parser(validator):
    """Return a SelectorParser using the default validator."""
    return SelectorParser(validator)
