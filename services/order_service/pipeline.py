import structlog
from shared.observability import ecomm_order_pipeline_failures_total
from .domain import OrderState

logger = structlog.get_logger(__name__)

class PipelineStep:
    def __init__(self, name, action, reaches: OrderState):
        self.name = name
        self.action = action
        self.reaches = reaches

class OrderPipeline:
    """
    Runs steps strictly in order over a shared ctx dict, tracking the
    submission state in ctx["state"].

    Steps have no compensations: when a step fails, whatever earlier steps
    wrote (for example a stored order) stays written.
    """
    def __init__(self):
        self.steps = []

    def add_step(self, name: str, action, reaches: OrderState):
        """Builder pattern to add a step and the state it leads to."""
        self.steps.append(PipelineStep(name, action, reaches))
        return self

    async def execute(self, ctx: dict) -> dict:
        """Executes steps sequentially. Any exception moves the run to FAILED and propagates."""
        ctx["state"] = OrderState.START
        for step in self.steps:
            try:
                await step.action(ctx)
            except Exception as e:
                logger.error(
                    "order_pipeline_failed",
                    step=step.name,
                    state=ctx["state"].value,
                    error=str(e),
                )
                ctx["state"] = OrderState.FAILED
                ecomm_order_pipeline_failures_total.labels(step_name=step.name).inc()
                raise
            ctx["state"] = step.reaches
            logger.debug("order_pipeline_transition", step=step.name, state=step.reaches.value)
        return ctx
