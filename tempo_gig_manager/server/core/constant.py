"""Static application constants."""

PROJECT_NAME = "Tempo Gig Manager"
SERVICE_NAME = "tempo-backend"
VERSION = "0.1.0"
SCHEMA_VERSION = "v1"

API_V1_STR = "/api/v1"
