"""
Surplus Food Marketplace Engine

Discovery of nearby vendors with time-limited surplus listings and
fulfillment of orders against limited, perishable stock.
"""

__version__ = "0.1.0"
