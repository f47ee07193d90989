"""Application layer: services orchestrating the domain models."""
