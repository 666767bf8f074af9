from abc import ABC, abstractmethod


class BillingStrategy(ABC):
    @abstractmethod
    def calculate(self, context):
        """Turn a BillingContext into a BillResult."""
