"""Text renderings of geometry."""
