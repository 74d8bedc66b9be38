"""
services/ - Business Logic Layer
================================
Composes repositories into atomic operations (customer + detail,
order + lines) and validates input before it reaches the database.
"""
