"""Application layer for the accounts bounded context."""
