"""Ordering sentinels for pipeline stages. Lower order runs closer to the caller."""

HIGHEST_PRECEDENCE = -(2**31)
LOWEST_PRECEDENCE = 2**31 - 1
