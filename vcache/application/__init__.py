"""Application layer: service protocols and the versioned cache services."""
