"""Student roster: a single-page FastAPI app over a persisted student list."""
