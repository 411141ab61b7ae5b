"""Repository adapters - Storage implementations."""

from .memory import InMemoryCustomerRepository, InMemoryPaymentRepository

__all__ = ["InMemoryCustomerRepository", "InMemoryPaymentRepository"]
