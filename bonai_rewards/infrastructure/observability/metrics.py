"""Prometheus metrics for reward claims, card interactions and animation health"""

from prometheus_client import Counter, Histogram

# Reward metrics
reward_claim_counter = Counter(
    "bonai_reward_claims_total",
    "Rewards applied to a brand",
    ["brand"],
)

# Card interaction metrics
card_toggle_counter = Counter(
    "bonai_card_toggles_total",
    "Bill card expansion toggles",
    ["direction"],  # expand | collapse
)

entry_settled_counter = Counter(
    "bonai_card_entries_settled_total",
    "Bill card entrance animations that ran to completion",
)

# Scheduled work that arrived after its owner was disposed
dropped_callback_counter = Counter(
    "bonai_dropped_callbacks_total",
    "Animation callbacks dropped after disposal",
)

# Images
logo_failure_counter = Counter(
    "bonai_logo_failures_total",
    "Logo images replaced by a placeholder glyph",
)

# Rendering
render_duration_histogram = Histogram(
    "bonai_render_duration_seconds",
    "Time to render a screen frame",
    ["screen"],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_card_toggle(direction: str) -> None:
    """Count an expand or collapse request"""
    card_toggle_counter.labels(direction=direction).inc()


def record_reward_claim(brand_name: str) -> None:
    """Count a reward applied to a brand"""
    reward_claim_counter.labels(brand=brand_name).inc()
