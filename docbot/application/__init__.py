"""Application layer: segment resolution, partitioning and the generate command."""
