"""
Service layer abstraction.

Services encapsulate business logic so that API handlers stay thin.
The employee store keeps its records in memory; swapping it for a
persistent implementation would not change the handlers.
"""
