"""Exception hierarchy for SearchTreeLib.

Normal tree use never raises: duplicate inserts, deletes of absent keys
and lookups that miss are all structural no-ops. These exceptions signal
misuse only.
"""


class SearchTreeError(Exception):
    """Base class for all SearchTreeLib errors."""
    pass


class ConfigurationError(SearchTreeError):
    """Raised when a TreeConfig fails validation."""
    pass


class IncomparableKeyError(SearchTreeError, TypeError):
    """Raised when keys cannot be ordered against each other."""
    pass


class NodeNotInTreeError(SearchTreeError, LookupError):
    """Raised when a node does not belong to the tree it was queried on."""
    pass
