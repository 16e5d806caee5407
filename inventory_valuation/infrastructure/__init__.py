"""Infrastructure layer - concrete adapters for core interfaces."""
