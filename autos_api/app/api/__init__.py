"""HTTP layer: versioned routers and request dependencies."""
