"""
Custom Exception Hierarchy

Distinguishes between:
1. Contract Violations (programming bugs that need fixing)
2. Configuration Errors (invalid static overlay configuration)

Per-record data problems (missing attribute record, non-numeric value,
stale lock id) are NOT exceptions. They degrade to omission or default
styling so interactive rendering stays resilient to partial data.

Exports:
    ContractViolationError: Component contract violated (bug)
    ConfigError: Invalid static configuration (fatal at construction)
"""


class ContractViolationError(TypeError):
    """
    Raised when component contracts are violated (programming bugs).

    These indicate:
    - Wrong types passed to functions
    - A behavior binding that is not a BehaviorType member
    - A dispatch table that does not cover every BehaviorType

    These should NEVER be caught and handled - they indicate bugs
    that need to be fixed in the code.
    """
    pass


class ConfigError(ValueError):
    """
    Invalid static configuration.

    Raised at construction time and must not be caught and retried:
    the same configuration will fail the same way.

    Examples:
        - Fewer than 2 color/bin-edge pairs
        - Fewer than 2 implicit bin edges
        - Unknown exclusivity policy
        - Continuous palette with a single color stop
        - Unparseable OVERLAY_* environment variable
    """
    pass
