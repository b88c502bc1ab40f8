"""Command-line interface adapters.

Provides CLI commands for the Shipwire client:
- fulfill: Submit an order read from a JSON file
- stock: Fetch stock levels
- tracking: Fetch tracking numbers
- shipping-methods: List the shipping method codes
"""
