"""Transport adapters for delivering requests to Shipwire."""
