"""Application layer - demo scenarios wired to the domain."""
