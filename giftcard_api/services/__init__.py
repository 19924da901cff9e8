"""
High-level use cases for the gift card API.

Each service orchestrates the shared store to implement business rules
(register a code, accept/decline it, set prices). Routers call these services
instead of manipulating the card map or the JSON files directly.
"""
