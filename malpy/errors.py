from __future__ import annotations


class MalError(Exception):
    """ Base class for all malpy errors"""
    pass


# -------------------------------
# Parse-time errors
# -------------------------------
class ParseError(MalError):
    """ Raised when source text cannot be read"""
    pass


class UnterminatedInput(ParseError):
    """ Raised when a list, vector or map is never closed"""

    def __init__(self, message: str = "unexpected end of input"):
        super().__init__(message)


class UnterminatedString(ParseError):
    """ Raised when a string literal is missing its closing quote"""

    def __init__(self, message: str = "unterminated string literal"):
        super().__init__(message)


class NewlineInString(ParseError):
    """ Raised when a raw newline appears inside a string literal"""

    def __init__(self, message: str = "unexpected newline in string literal"):
        super().__init__(message)


class UnknownEscapeSequence(ParseError):
    """ Raised when a string contains an unsupported backslash escape"""

    def __init__(self, char: str):
        super().__init__(f"unknown escape sequence \\{char}")
        self.char = char


class UnexpectedToken(ParseError):
    """ Raised when a token appears where it cannot be read"""

    def __init__(self, token: str, message: str | None = None):
        super().__init__(message or f"unexpected token {token!r}")
        self.token = token


# -------------------------------
# Eval-time errors
# -------------------------------
class EvalError(MalError):
    """ Raised when a form cannot be evaluated"""
    pass


class SymbolNotFound(EvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"symbol '{name}' not found")
        self.name = name


class FunctionUndefined(EvalError):
    """ Raised when a name in call position has no native definition"""

    def __init__(self, name: str):
        super().__init__(f"function '{name}' is undefined")
        self.name = name


class BadFunctionDesignator(EvalError):
    """ Raised when the head of an application is not callable"""

    def __init__(self, designator: str):
        super().__init__(f"'{designator}' is not a function")
        self.designator = designator


class NotANumber(EvalError):
    """ Raised when an integer argument is required"""

    def __init__(self, message: str = "argument is not a number"):
        super().__init__(message)


class NotASymbol(EvalError):
    """ Raised when a binding name is not a symbol"""

    def __init__(self, message: str = "expected a symbol"):
        super().__init__(message)


class NotAList(EvalError):
    """ Raised when a list argument is required"""

    def __init__(self, message: str = "expected a list"):
        super().__init__(message)


class InvalidArgs(EvalError):
    """ Raised when the number or shape of arguments is incorrect"""

    def __init__(self, message: str = "invalid arguments"):
        super().__init__(message)


class UnsupportedExpression(EvalError):
    """ Raised when evaluating a form kind that has no evaluation rule"""

    def __init__(self, message: str = "expression cannot be evaluated"):
        super().__init__(message)
