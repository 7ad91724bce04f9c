"""Registry of special forms for the malpy evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Each handler receives the unevaluated forms after the
head, the current Environment and the evaluator.
"""

from malpy.types.symbol import Symbol
from malpy.evaluation.special_forms.def_form import def_form
from malpy.evaluation.special_forms.let_form import let_form
from malpy.evaluation.special_forms.fn_form import fn_form
from malpy.evaluation.special_forms.do_form import do_form

SPECIAL_FORMS = {
    Symbol("def!"): def_form,
    Symbol("let*"): let_form,
    Symbol("fn*"): fn_form,
    Symbol("do"): do_form,
}
