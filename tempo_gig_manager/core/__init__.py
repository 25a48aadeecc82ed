"""Core building blocks shared by the server: persistence, models, logging, monitoring and security."""
