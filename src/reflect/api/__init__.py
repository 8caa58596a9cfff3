"""HTTP application: app factory, error handlers and routes."""
