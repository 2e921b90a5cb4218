"""SimpliOptions backend: market data service for the options-trading demo."""
