"""Registry of special forms for the fuzzlisp evaluator.

Maps head names to handlers whose evaluation rule is built into the
evaluator. The evaluator consults this table before the host function
table, so a host function can never shadow a special form.
"""

from fuzzlisp.evaluation.special_forms.env_form import env_form

SPECIAL_FORMS = {
    "env": env_form,
}
