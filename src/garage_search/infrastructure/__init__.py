"""Infrastructure layer: directory implementations and service wiring."""
