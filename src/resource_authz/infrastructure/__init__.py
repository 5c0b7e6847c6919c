"""Infrastructure layer: ports and permission checker adapters."""
