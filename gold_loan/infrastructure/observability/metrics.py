"""Prometheus metrics for calculation volume, failures, and rate maintenance"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "gold_loan_calculation_total",
    "Total loan calculations completed",
    ["mode", "purity"],  # by_amount | by_weight
)

calculation_error_counter = Counter(
    "gold_loan_calculation_errors_total",
    "Loan calculations rejected",
    ["mode", "reason"],  # invalid_input | rate_not_found | scheme_not_found
)

principal_amount_histogram = Histogram(
    "gold_loan_principal_amount",
    "Principal amount of completed calculations",
    buckets=[10_000, 50_000, 100_000, 250_000, 500_000, 1_000_000, 5_000_000],
)

# Admin metrics
gold_rate_update_counter = Counter(
    "gold_rate_updates_total",
    "Gold rate upserts",
    ["purity"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(mode: str, purity: str, principal_amount: float) -> None:
    """Record a completed calculation"""
    calculation_counter.labels(mode=mode, purity=purity).inc()
    principal_amount_histogram.observe(principal_amount)


def record_calculation_error(mode: str, reason: str) -> None:
    calculation_error_counter.labels(mode=mode, reason=reason).inc()
