"""Registry of special forms for the protolisp evaluator.

Maps classified form types to handler functions that implement their
non-standard evaluation rules. Calls and method calls are handled by the
application engine instead.
"""

from protolisp.evaluation.forms import DefFunction, DefVariable, Do, ObjectLiteral, SetVariable
from protolisp.evaluation.special_forms.def_form import def_function_form, def_variable_form
from protolisp.evaluation.special_forms.do_form import do_form
from protolisp.evaluation.special_forms.object_form import object_form
from protolisp.evaluation.special_forms.set_form import set_form

SPECIAL_FORMS = {
    Do: do_form,
    DefVariable: def_variable_form,
    DefFunction: def_function_form,
    SetVariable: set_form,
    ObjectLiteral: object_form,
}
