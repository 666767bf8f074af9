from ecgbill.utils.logger import get_logger

logger = get_logger(__name__)


class BillingEngine:

    def __init__(self, strategy):
        self.strategy = strategy

    def run(self, ctx):
        result = self.strategy.calculate(ctx)
        logger.debug(
            f"{result.policy} bill: {result.units_consumed} kWh "
            f"{result.customer_class.value}/{result.mode.value} -> payable {result.payable:.2f}"
        )
        return result
