"""Registry of special forms for the tinylisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application. Keys
are Symbols, so lookups are case-insensitive.
"""

from tinylisp.types.symbol import Symbol
from tinylisp.evaluation.special_forms.quote_forms import quote_form
from tinylisp.evaluation.special_forms.cond_form import cond_form
from tinylisp.evaluation.special_forms.defun_form import defun_form
from tinylisp.evaluation.special_forms.setq_form import setq_form
from tinylisp.evaluation.special_forms.eval_form import eval_form
from tinylisp.evaluation.special_forms.apply_form import apply_form
from tinylisp.evaluation.special_forms.logic_forms import and_form, or_form, not_form
from tinylisp.evaluation.special_forms.if_form import if_form
from tinylisp.evaluation.special_forms.let_forms import let_form, let_star_form
from tinylisp.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("cond"): cond_form,
    Symbol("defun"): defun_form,
    Symbol("setq"): setq_form,
    Symbol("eval"): eval_form,
    Symbol("apply"): apply_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("not"): not_form,
    Symbol("if"): if_form,
    Symbol("let"): let_form,
    Symbol("let*"): let_star_form,
    Symbol("lambda"): lambda_form,
}
