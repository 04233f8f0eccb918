from protolisp import EvaluatorFn
from protolisp.errors import ArityMismatch
from protolisp.evaluation.forms import FieldMember, MethodMember, ObjectLiteral
from protolisp.evaluation.objects import THIS, define_field, new_object
from protolisp.types.environment import Environment
from protolisp.types.values import Method, Object, RuntimeValue


def _define_method(obj: Object, member: MethodMember, evaluate_fn: EvaluatorFn) -> None:
    parameters = member.parameters
    body = member.body

    def definition(receiver: RuntimeValue, arguments: list[RuntimeValue]) -> RuntimeValue:
        if len(arguments) != len(parameters):
            raise ArityMismatch(
                f"Method {member.name} expects {len(parameters)} arguments, received {len(arguments)}."
            )
        # a frame per call, so the object's own scope is never written to
        frame = Environment(obj.env)
        frame.define(THIS, receiver)
        for parameter, argument in zip(parameters, arguments):
            frame.define(parameter, argument)
        return evaluate_fn(body, frame)

    obj.env.define(member.name, Method(member.name, definition, obj))


def object_form(form: ObjectLiteral, env: Environment, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    """
    (object)
    (object <Name>)
    (object [(<field> <value>)] [((<.method> [parameters]) <body>)])

    Field values are evaluated left to right in the enclosing scope. Each
    field gets a `.field` getter and a `.field=` setter; each method runs
    with `this` bound to the receiver of the call.
    """
    obj = new_object(form.name, env)
    for member in form.members:
        if isinstance(member, FieldMember):
            define_field(obj, member.name, evaluate_fn(member.value, env))
        else:
            _define_method(obj, member, evaluate_fn)
    return obj
