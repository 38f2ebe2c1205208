"""FastAPI dependency providers for the accounts bounded context."""
