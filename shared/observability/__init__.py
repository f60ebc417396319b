from .setup import setup_observability, configure_logging
from .metrics import (
    ecomm_order_submissions_total,
    ecomm_order_submission_duration_seconds,
    ecomm_order_pipeline_failures_total,
    ecomm_lookup_timeouts_total
)
