"""Application layer: DTOs, interfaces (ports) and services.

Depends only on domain and protocol definitions. Infrastructure
implements the interfaces (repositories, password hasher, tokens).
"""
