"""
Failures of an order submission. Each one ends the pipeline and reaches the
caller of `OrderService.submit_order` unchanged; none of them is retried.
"""


class OrderSubmissionError(Exception):
    """Base class; `outcome` labels the failure in logs and metrics."""

    outcome = "failed"


class CustomerNotFound(OrderSubmissionError):
    outcome = "customer_not_found"

    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(f"Customer {customer_id} not found")


class CardNotFound(OrderSubmissionError):
    outcome = "card_not_found"

    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(f"Customer {customer_id} has no card on file")


class EmptyCart(OrderSubmissionError):
    outcome = "empty_cart"

    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(f"There aren't items in the cart of customer {customer_id}")


class PaymentRecordNotFound(OrderSubmissionError):
    """
    Raised after the order was stored. The stored order keeps
    valid_payment=False; insert and update are not one transaction.
    """

    outcome = "payment_record_not_found"

    def __init__(self, customer_id: int, order_id: str):
        self.customer_id = customer_id
        self.order_id = order_id
        super().__init__(
            f"Customer {customer_id} has no payment record; "
            f"order {order_id} was stored with an invalid payment"
        )


class StorageInconsistency(OrderSubmissionError):
    """The order just inserted could not be found for its update."""

    outcome = "storage_inconsistency"

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order {order_id} vanished from storage before its payment update")


class LookupTimeout(OrderSubmissionError):
    outcome = "lookup_timeout"

    def __init__(self, lookup: str, timeout: float | None = None):
        self.lookup = lookup
        self.timeout = timeout
        message = f"Lookup '{lookup}' exceeded its deadline"
        if timeout is not None:
            message += f" of {timeout}s"
        super().__init__(message)


class LookupFailed(OrderSubmissionError):
    outcome = "lookup_failed"

    def __init__(self, lookup: str, reason: str):
        self.lookup = lookup
        self.reason = reason
        super().__init__(f"Lookup '{lookup}' failed: {reason}")
