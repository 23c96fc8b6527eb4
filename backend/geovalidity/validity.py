"""
Public entry points.

Both functions consume the same lazy stream of findings: ``is_valid`` stops at
the first one, ``explain_invalidity`` collects them all. ``is_valid(g)`` is
therefore always ``explain_invalidity(g) is None``.
"""
from geovalidity.schemas.problems import ProblemReport
from geovalidity.validators.geometry import iter_problems
import logging


logger = logging.getLogger(__name__)


def is_valid(geometry) -> bool:
    return next(iter_problems(geometry), None) is None

def explain_invalidity(geometry) -> ProblemReport | None:
    problems = tuple(iter_problems(geometry))
    if not problems:
        return None
    logger.debug('%s is invalid, %d problem(s) found', type(geometry).__name__, len(problems))
    return ProblemReport(problems)
