import itertools
import logging
from typing import Any, Dict, List, Optional

from actions_model.workflow.ast import Job, Strategy

logger = logging.getLogger(__name__)

INCLUDE_KEY = 'include'
EXCLUDE_KEY = 'exclude'

Variant = Dict[str, Any]


def expand_matrix(strategy: Optional[Strategy]) -> List[Variant]:
    """Expands a job strategy into the variants the job runs with.

    The axes of the matrix are crossed in declaration order. A candidate is
    dropped when any ``exclude`` entry matches it, otherwise every matching
    ``include`` entry is merged into it in declaration order, so the last
    one wins on conflicting keys. Entries match on the keys they share with
    the candidate only, so an entry sharing no keys matches everything.
    Includes are matched against the candidate as produced by the cross
    product, not against values merged by earlier includes.

    The strategy is left untouched and can be expanded again.

    Args:
        strategy: The job's strategy, or None if it has none.

    Returns:
        List[Variant]: One mapping of axis name to value per job run. Without
            a strategy this is a single empty variant.
    """
    if strategy is None:
        return [{}]

    axes = dict(strategy.matrix_)
    includes: List[Variant] = list(axes.pop(INCLUDE_KEY, None) or [])
    excludes: List[Variant] = list(axes.pop(EXCLUDE_KEY, None) or [])

    variants: List[Variant] = []
    for candidate in cartesian_product(axes):
        excluded_by = next(
            (exclude for exclude in excludes if common_keys_match(candidate, exclude)),
            None
        )
        if excluded_by is not None:
            logger.debug(f"Skipping matrix {candidate} due to exclude {excluded_by}")
            continue
        base = dict(candidate)
        for include in includes:
            if common_keys_match(base, include):
                logger.debug(f"Setting additional values on matrix {candidate} due to include {include}")
                candidate.update(include)
        variants.append(candidate)
    return variants


def get_matrixes(job: Job) -> List[Variant]:
    """Variants of a job, see :func:`expand_matrix`."""
    return expand_matrix(job.strategy_)


def cartesian_product(axes: Dict[str, List[Any]]) -> List[Variant]:
    """One variant per combination of axis values, in declaration order.

    No axes yield a single empty variant, an empty axis yields none.
    """
    names = list(axes)
    return [
        dict(zip(names, values))
        for values in itertools.product(*(axes[name] for name in names))
    ]


def common_keys_match(a: Variant, b: Variant) -> bool:
    """True if every key present in both mappings has equal values in each."""
    return all(
        values_equal(a_val, b[a_key])
        for a_key, a_val in a.items()
        if a_key in b
    )


def values_equal(a: Any, b: Any) -> bool:
    # 1 == True in Python, but a matrix value of 1 is not the value true
    return type(a) is type(b) and a == b
