__all__ = (
    "Absent",
    "Match2Pattern",
    "Option",
    "Present",
    "absent",
    "all_present",
    "bool_to_option",
    "cat_options",
    "is_absent",
    "is_present",
    "lift_a2",
    "match2",
    "of",
    "option",
)

from functional_option.monads.combinators import all_present, bool_to_option, cat_options, lift_a2
from functional_option.monads.match import Match2Pattern, match2
from functional_option.monads.option import Absent, Option, Present, absent, is_absent, is_present, of, option
