"""SWEeM: backend for software-development-process management.

Clients, projects and users behind JWT-authenticated CRUD endpoints.
"""

__version__ = "1.0.0"
