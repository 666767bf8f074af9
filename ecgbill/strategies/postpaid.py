from ecgbill.engine.response import BillResult
from ecgbill.models.period import Period
from ecgbill.models.request import BillingMode
from ecgbill.models.tariff import CustomerClass
from ecgbill.services.postpaid_charges import PostpaidChargeService
from ecgbill.strategies.base import BillingStrategy


class PostpaidBilling(BillingStrategy):

    def __init__(self, policy):
        self.policy = policy

    def calculate(self, ctx):

        charge_service = PostpaidChargeService()
        request = ctx.request
        customer_class = CustomerClass(request.customer_class)
        mode = BillingMode(request.mode)

        # 1. Quick mode: canonical month, nothing carried over
        if mode is BillingMode.QUICK:
            period = Period()
            balance = paid = adjustment = 0.0
        else:
            period = ctx.period
            balance = request.prior_balance
            paid = request.payments_received
            adjustment = request.manual_adjustment if self.policy.applies_adjustment else 0.0

        # 2. Period charges
        total, breakup = charge_service.calculate_period(
            ctx.meter,
            ctx.schedule.bands(customer_class),
            period,
            customer_class,
            self.policy
        )

        # 3. Carry balance, payments and adjustment
        payable = total + balance - paid + adjustment

        return BillResult(
            units_consumed=ctx.meter.units_consumed,
            band_breakdown=breakup["slabs"],
            energy_cost=breakup["energy"],
            service_charge=breakup["service"],
            levies=breakup["levies"],
            vat=breakup["vat"],
            total_bill=total,
            adjustment_applied=adjustment,
            payable=payable,
            customer_class=customer_class,
            mode=mode,
            policy=self.policy.name,
            period_days=period.days,
            prior_balance_applied=balance,
            payments_applied=paid,
            taxed=customer_class in self.policy.taxed_classes,
        )
