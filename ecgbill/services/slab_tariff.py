from ecgbill.engine.response import BandUsage


class SlabTariffCalculator:
    """
    Progressive (telescopic) allocation of consumption over bands.

    Bands are filled in order; a band is only reported once consumption
    reaches it, so the breakdown stops at the last band touched.
    """

    def calculate(self, units, bands):
        remaining = units
        energy = 0.0
        breakdown = []

        for band in bands:
            if remaining <= 0:
                break

            used = band.take(remaining)
            cost = used * band.rate
            energy += cost
            breakdown.append(BandUsage(units=used, rate=band.rate, cost=cost))
            remaining -= used

        return energy, tuple(breakdown)
