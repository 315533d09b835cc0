"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that every feature uses (settings,
logging, errors, validation helpers, key-value stores). Keep record-specific
logic in the corresponding feature package (e.g. `ohlc/`).
"""
