"""ASGI plumbing — request pipeline, response sending, server startup."""
