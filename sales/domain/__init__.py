"""
Domain Layer - Sales Business Logic

This module contains the sales order rules with no infrastructure dependencies.
Entities, value objects and domain services for the checkout reside here.

Structure:
- entities/: Order aggregate, OrderItem and Voucher
- value_objects/: Immutable value objects (Percentage, ValidationResult)
- services/: Domain services (voucher eligibility validation)
- exceptions.py: Domain-specific exceptions
"""
