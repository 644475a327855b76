"""
Orders feature: HTTP routes, business rules and raw SQL for the `orders` table.
"""
