"""Application layer orchestrating domain rules and repositories."""
