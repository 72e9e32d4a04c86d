"""Registry of special forms for the Ember evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so a
form name always wins over any binding of the same symbol.

Every handler has the signature `(tail, env, evaluate_fn)` and returns either
a final value or a TailCall for the trampoline to continue with.
"""

from ember.types.symbol import Symbol
from ember.evaluation.special_forms.define_form import define_form
from ember.evaluation.special_forms.let_forms import let_star_form, letrec_form
from ember.evaluation.special_forms.progn_form import do_form
from ember.evaluation.special_forms.if_form import if_form
from ember.evaluation.special_forms.lambda_form import fun_form
from ember.evaluation.special_forms.eval_form import eval_form

SPECIAL_FORMS = {
    Symbol("def!"): define_form,
    Symbol("let*"): let_star_form,
    Symbol("letrec"): letrec_form,
    Symbol("do"): do_form,
    Symbol("if"): if_form,
    Symbol("fun*"): fun_form,
    Symbol("eval"): eval_form,
}
