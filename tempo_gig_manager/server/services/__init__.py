"""
Server-side services used by the API routers.

- google_maps: Google Maps Places / Address Validation client
- admin_auth: Admin dashboard authorization dependency
"""
