"""Consecutive failure tracking for the estimation service."""

import logging
from dataclasses import dataclass

DEFAULT_FAILURE_THRESHOLD = 3

_logger = logging.getLogger(__name__)


@dataclass
class ReliabilityGovernor:
    """Recommends a client update after repeated estimation failures.

    The counter lives for the client session only. Several independent
    failures in a row suggest the service contract changed in a way this
    client no longer handles.
    """

    threshold: int = DEFAULT_FAILURE_THRESHOLD
    consecutive_failures: int = 0

    def report_success(self) -> None:
        """Reset the failure streak."""
        self.consecutive_failures = 0

    def report_failure(self) -> None:
        """Extend the failure streak."""
        self.consecutive_failures += 1
        if self.consecutive_failures == self.threshold:
            _logger.warning(
                "Estimation failed %s times in a row; recommending update",
                self.consecutive_failures,
            )

    def is_update_recommended(self) -> bool:
        """Return True once the streak reaches the threshold."""
        return self.consecutive_failures >= self.threshold

    def reset(self) -> None:
        """Clear the streak after the user dismisses the update prompt."""
        self.consecutive_failures = 0
