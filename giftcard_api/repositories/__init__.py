"""
Persistence adapters.

Today the service mirrors its state to JSON files; services depend on the
storage object rather than touching the files.
"""
