"""Domain layer - storage models, workload primitives and value objects."""
