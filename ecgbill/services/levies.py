from ecgbill.engine.response import LevyAmounts


class LevyService:

    def calculate(self, energy, customer_class, policy):
        """
        Statutory levies on the energy charge, plus VAT.

        NHIL/GETFund and VAT only apply to the policy's taxed classes;
        for the others the VAT base is never built.
        Returns (LevyAmounts, vat).
        """
        street_light = energy * policy.street_light_rate
        national_electrification = energy * policy.nel_rate

        if customer_class not in policy.taxed_classes:
            return LevyAmounts(street_light, national_electrification, 0.0), 0.0

        nhil_getfund = energy * policy.nhil_getfund_rate
        vat_base = energy + street_light + national_electrification + nhil_getfund
        vat = vat_base * policy.vat_rate

        return LevyAmounts(street_light, national_electrification, nhil_getfund), vat
