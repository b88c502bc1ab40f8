"""Country lookup adapters."""
