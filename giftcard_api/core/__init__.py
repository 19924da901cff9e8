"""
Core utilities shared across the gift card API.

Configuration, logging setup and the admin access guard live here so that
routers and services never read os.environ directly.
"""
