
class LispError(Exception):
    """ Base class for all tinylisp errors"""
    pass


# -------------------------------
# Reader errors
# -------------------------------
class LispReadError(LispError):
    """ Raised when source text cannot be turned into an expression"""

class LispUnmatchedParenthesis(LispReadError):
    """ Raised when input ends inside an open list"""

class LispUnexpectedCloseParen(LispReadError):
    """ Raised on a ')' with no open list"""

class LispTrailingTokens(LispReadError):
    """ Raised when tokens remain after one complete expression"""

class LispUnexpectedEndOfInput(LispReadError):
    """ Raised when a quote is not followed by an expression"""

class LispNestingTooDeep(LispError):
    """ Raised when a value is nested too deeply to read or print"""


# -------------------------------
# Evaluation errors
# -------------------------------
class LispEvalError(LispError):
    """ Raised when evaluating an expression fails"""

class LispArityError(LispEvalError):
    """ Raised when the number of arguments passed to a function or form is incorrect"""

class LispMalformedForm(LispEvalError):
    """ Raised when a special form's bindings or clauses have the wrong shape"""

class LispTypeError(LispEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class LispDivisionByZero(LispEvalError):
    """ Raised by / mod and floor on a zero divisor"""

class LispUnknownFunction(LispEvalError):
    """ Raised when calling a name with no primitive or global function definition"""

class LispNotCallable(LispEvalError):
    """ Raised when apply is given something other than a function name"""

class LispInvalidOperator(LispEvalError):
    """ Raised when the head of a list form is not a symbol"""

class LispRecursionError(LispEvalError):
    """ Raised when evaluation exhausts the host recursion depth"""
