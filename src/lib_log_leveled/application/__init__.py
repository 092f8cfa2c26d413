"""Application layer: ports and the use cases that drive log emission."""
