"""
CBR Rates - Central Bank of Russia Exchange Rate Client

Fetches the latest official USD and EUR rates (in roubles) together with
their day-over-day change from the cbr.ru XML_dynamic service.
"""

__version__ = "1.0.0"
