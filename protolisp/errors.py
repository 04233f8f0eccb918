class ProtoLispError(Exception):
    """ Base class for all protolisp errors"""
    pass

class ParseError(ProtoLispError):
    """ Raised when source text cannot be read into an AST"""

class EvaluateError(ProtoLispError):
    """ Base class for errors raised while evaluating an expression"""

class UndefinedVariable(EvaluateError):
    """ Raised when a variable is referenced or set before it is defined"""

class UndefinedFunction(EvaluateError):
    """ Raised when a call names a function that is not bound"""

class Redefinition(EvaluateError):
    """ Raised when def rebinds a name already bound in the same frame"""

class ArityMismatch(EvaluateError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class InvalidForm(EvaluateError):
    """ Raised when a special form does not have the required shape"""

class InvalidMemberDefinition(EvaluateError):
    """ Raised when an object member is neither a field nor a method declaration"""

class MethodNotFound(EvaluateError):
    """ Raised when a method call names a member the receiver does not have"""

class NotAnObject(EvaluateError):
    """ Raised when a method is called on something that is not an object"""

class NotInvokable(EvaluateError):
    """ Raised when a call resolves to a value that is not a function"""

class TypeMismatch(EvaluateError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class DivisionByZero(EvaluateError):
    """ Raised when a builtin divides by a zero operand"""
