from ecgbill.services.levies import LevyService
from ecgbill.services.slab_tariff import SlabTariffCalculator


class PostpaidChargeService:

    def calculate_period(self, meter, bands, period, customer_class, policy):
        slab_calc = SlabTariffCalculator()
        levy_service = LevyService()

        energy, slab_breakup = slab_calc.calculate(
            meter.units_consumed,
            bands
        )

        levies, vat = levy_service.calculate(energy, customer_class, policy)
        service = policy.service_charge.calculate(customer_class, period)

        total = (
            energy
            + levies.street_light
            + levies.national_electrification
            + levies.nhil_getfund
            + vat
            + service
        )

        return total, {
            "energy": energy,
            "levies": levies,
            "vat": vat,
            "service": service,
            "slabs": slab_breakup
        }
