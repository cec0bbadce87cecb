class FuzzlispError(Exception):
    """ Base class for all fuzzlisp errors"""
    pass

class FuzzlispInvalidKey(FuzzlispError):
    """ Raised when a non-string name is bound in an environment or function table"""
    pass

class FuzzlispTypeError(FuzzlispError):
    """ Raised when a host passes a Python object of the wrong type"""


class FuzzlispSyntaxError(FuzzlispError):
    """ Raised when program text cannot be turned into a single AST"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position

class UnexpectedEndOfExpression(FuzzlispSyntaxError):
    """ Raised when the tokens run out before a closing parenthesis"""

class ExpectedOpeningParenthesis(FuzzlispSyntaxError):
    """ Raised when a multi-token program does not start with '('"""

class TooManyTokens(FuzzlispSyntaxError):
    """ Raised when tokens remain after one complete top-level form"""


# The parse entry point's failure type.
ParseError = FuzzlispSyntaxError
