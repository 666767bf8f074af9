"""
Postpaid electricity bill calculator: progressive tariff bands, statutory
levies and an editable tariff schedule.
"""

__version__ = "0.1.0"
