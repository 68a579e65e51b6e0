class CycleError(RuntimeError):
    r"""Operation would introduce a cycle into a partial order."""


class CorruptedPosetError(RuntimeError):
    r"""Poset was left inconsistent by a bulk relation commit and cannot be used."""


class PendingRelationsError(RuntimeError):
    r"""Poset has staged relations that have not been committed."""


class ForeignElementError(RuntimeError):
    r"""Element handles belonging to different posets were compared."""


class SearchExhaustedError(RuntimeError):
    r"""Exhaustive search finished without finding a solution."""


class NoRealizerError(SearchExhaustedError):
    r"""No realizer of the requested size exists."""


class NotIsomorphicError(SearchExhaustedError):
    r"""Two posets are not isomorphic."""
