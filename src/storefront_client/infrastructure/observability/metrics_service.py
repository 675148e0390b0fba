"""Prometheus metrics declarations for the storefront client.

All metrics are declared statically at module level.
Labels are operation names and outcomes only, never product or order ids.
"""

from prometheus_client import Counter, Histogram

# ── Backend call metrics ──────────────────────────────────────────

BACKEND_CALLS_TOTAL = Counter(
    "storefront_backend_calls_total",
    "Total backend operations issued",
    ["operation", "outcome"],
)

BACKEND_CALL_DURATION_SECONDS = Histogram(
    "storefront_backend_call_duration_seconds",
    "Backend operation latency in seconds",
    ["operation"],
)

# ── Checkout metrics ──────────────────────────────────────────────

ORDER_PLACEMENTS_TOTAL = Counter(
    "storefront_order_placements_total",
    "Order placement attempts that reached the backend",
    ["outcome"],
)
