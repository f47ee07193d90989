"""Domain layer: buildings and the improvements applied to them."""
