"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive raw data from the database and return domain model objects.
Write operations accept an optional UnitOfWork to take part in a larger transaction.
"""
