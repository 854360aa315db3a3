"""Fixed configuration tables: economic parameters and the species catalog."""
