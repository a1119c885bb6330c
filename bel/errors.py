
class BelError(Exception):
    """ Base class for all Bel errors"""
    pass

class BelUnboundSymbol(BelError):
    """ Raised when a symbol is bound neither locally nor globally"""
    pass

class BelTypeMismatch(BelError):
    """ Raised when an object of the wrong variant is used, e.g. a pair where a symbol is required"""

class BelArityMismatch(BelError):
    """ Raised when a call or special form receives the wrong number of arguments"""

class BelMalformedList(BelError):
    """ Raised when a value used as a list is neither nil nor a pair"""

class BelMalformedFunction(BelError):
    """ Raised when a closure literal does not have the shape (lit clo nil params body)"""

class BelUnknownFunction(BelError):
    """ Raised when a function name has no global binding"""

class BelUnknownPrimitive(BelError):
    """ Raised when a primitive name is not registered"""

class BelNotImplemented(BelError):
    """ Raised for evaluation paths that are deliberately unsupported (chars, streams, macro calls)"""

class BelRecursionLimitExceeded(BelError):
    """ Raised when evaluation nests deeper than the configured limit"""

class BelSyntaxError(BelError):
    """ Raised when source text cannot be read into a single object"""

class BelLoadError(BelError):
    """ Raised when a block of a source file fails to parse or evaluate"""

    def __init__(self, message: str, block: str = "", index: int = 0):
        super().__init__(message)
        self.block = block
        self.index = index
