class MalError(Exception):
    """ Base class for all mal errors"""
    pass

class MalSyntaxError(MalError):
    """ Raised when the reader is given malformed input"""

class MalEmptyInput(MalSyntaxError):
    """ Raised when the input holds no form at all"""

class MalEvaluationError(MalError):
    """ Base class for errors raised while evaluating a form"""

class MalUnboundSymbol(MalEvaluationError):
    """ Raised when a symbol is not bound in any enclosing environment"""

class MalArityError(MalEvaluationError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class MalNotCallable(MalEvaluationError):
    """ Raised when the head of an application is not a function"""

class MalTypeError(MalEvaluationError):
    """ Raised when a built-in or special form receives a value of the wrong type"""

class MalArithmeticError(MalEvaluationError):
    """ Raised on arithmetic failures such as division by zero"""
