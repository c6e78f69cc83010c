"""Registry of special forms for the Mallet evaluator.

A special form is a function binding whose policy passes some leading argument
forms through unevaluated. Each entry maps a name to its policy and handler.
"""

from mallet.types.native_fn import EvaluateSuffix
from mallet.evaluation.special_forms.define_form import define_form
from mallet.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    "def!": (EvaluateSuffix(1), define_form),
    "let*": (EvaluateSuffix(2), let_form),
}
