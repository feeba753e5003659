"""Pricing toolkit: currencies and conversion, markups, commissions, adjustments and full pricing details."""

__version__ = "0.1.5"