"""API layer: versioned routers and endpoints."""
