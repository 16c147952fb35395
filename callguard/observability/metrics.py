"""Prometheus metrics for callguard.

Counts content encryption work and filtered responses; exposed by the API
on the metrics route.
"""

from prometheus_client import Counter

CONTENT_ENCRYPTIONS = Counter(
    "callguard_content_encryptions_total",
    "Total number of content fields encrypted",
)

CONTENT_DECRYPTIONS = Counter(
    "callguard_content_decryptions_total",
    "Total number of decryption attempts",
    labelnames=["outcome"],
)

FILTERED_RESPONSES = Counter(
    "callguard_filtered_responses_total",
    "Total number of responses filtered by role",
    labelnames=["role"],
)

ACCESS_DENIALS = Counter(
    "callguard_access_denials_total",
    "Total number of cross-tenant access denials",
    labelnames=["role", "reason"],
)
