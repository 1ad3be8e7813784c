"""EcoPlates food donation matching service."""
