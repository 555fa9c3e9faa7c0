"""District elimination tournament simulation."""
