"""Testing fakes – in-memory doubles for client ports."""
from dataselect.testing.fakes.secret_client import InMemorySecretClient

__all__ = ["InMemorySecretClient"]
