from prometheus_client import Counter, Histogram

# Business Metrics
ecomm_order_submissions_total = Counter(
    "ecomm_order_submissions_total",
    "Total order submissions processed",
    ["outcome"] # Labels: 'success', 'customer_not_found', 'empty_cart', etc.
)

ecomm_order_submission_duration_seconds = Histogram(
    "ecomm_order_submission_duration_seconds",
    "Order submission duration in seconds"
)

ecomm_order_pipeline_failures_total = Counter(
    "ecomm_order_pipeline_failures_total",
    "Order pipeline failures by the step that failed",
    ["step_name"] # Labels: 'resolve_customer', 'join_card_and_items', etc.
)

ecomm_lookup_timeouts_total = Counter(
    "ecomm_lookup_timeouts_total",
    "Upstream lookups that exceeded their deadline",
    ["lookup"] # Labels: 'customer', 'card', 'cart', 'payment'
)
