"""Infrastructure: Redis and in-memory implementations of the store protocols."""
