class SelectorBuilderError(Exception):
    """Base error for invalid builder usage."""
    pass

class DuplicatePartError(SelectorBuilderError):
    """Element, id or pseudo-element set more than once."""
    pass

class OrderViolationError(SelectorBuilderError):
    """Selector part appended after a higher-ranked part."""
    pass

class CombinedSelectorError(SelectorBuilderError):
    """Part appended to a selector produced by combine()."""
    pass

class ValidationError(Exception):
    """Base validation error."""
    pass

class InvalidSelectorError(ValidationError):
    """Invalid selector error."""
    pass

class InvalidHTMLError(ValidationError):
    """Invalid HTML error."""
    pass

class ParseError(Exception):
    """Error parsing input data."""
    pass
