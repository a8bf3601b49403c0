"""Domain layer (business logic and domain models).

Domain modules should not depend on UI, HTTP or observability code.
"""
