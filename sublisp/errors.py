
class SublispError(Exception):
    """ Base class for all sublisp errors"""

    def __init__(self, message: str = "error"):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"error: {self.message}"


class SublispSyntaxError(SublispError):
    """ Raised when source text cannot be read"""


class SublispEndOfInput(SublispSyntaxError):
    """ Raised when the reader runs out of input in the middle of an expression"""

    def __init__(self, message: str = "reached end of sequence."):
        super().__init__(message)


class SublispUnexpectedChar(SublispSyntaxError):
    """ Raised when the reader meets a character it cannot place"""

    def __init__(self, char: str, col: int):
        super().__init__(f"unexpected character '{char}' at col {col}.")
        self.char = char
        self.col = col


class SublispUnboundSymbol(SublispError):
    """ Raised when a symbol is used before it is bound"""


class SublispArityError(SublispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, message: str = "invalid number of arguments given."):
        super().__init__(message)


class SublispTypeError(SublispError):
    """ Raised when the types of arguments passed to a function are incorrect"""

    def __init__(self, message: str = "invalid argument(s) given."):
        super().__init__(message)


class SublispMalformedError(SublispError):
    """ Raised when a special form clause does not have the expected shape"""

    def __init__(self, message: str = "malformed expression."):
        super().__init__(message)


class SublispEvalError(SublispError):
    """ Raised for evaluation failures that have no more specific kind"""


class SublispQuit(Exception):
    """ Raised by (quit) to unwind evaluation and end the session.

    Not a SublispError, so handlers that report an error and carry on do not
    catch it.
    """
