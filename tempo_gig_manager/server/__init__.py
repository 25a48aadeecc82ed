"""FastAPI server for the Tempo Gig Manager API."""
