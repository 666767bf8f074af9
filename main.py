from ecgbill.api import API, BillingMode, BillingRequest, CustomerClass, UpdateBand
from ecgbill.services.bill_report import bill_text

schedule = API.default_schedule()

# raise the first residential band to 60 kWh
schedule = API.apply_edit(
    schedule,
    UpdateBand(CustomerClass.RESIDENTIAL, 0, {"limit": 60})
)

request = BillingRequest(
    previous_reading=100,
    current_reading=220,
    period_days=30,
    prior_balance=50,
    payments_received=20,
    manual_adjustment=-5,
    customer_class=CustomerClass.RESIDENTIAL,
    mode=BillingMode.DETAILED
)

result = API.compute_bill(schedule, request)

print(bill_text(result))
print(result.to_json())
