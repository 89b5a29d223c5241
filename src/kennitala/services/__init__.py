"""Service layer — validation returning ServiceResult.

Services may import from domain and config.
Domain exceptions never escape a service method.
"""
