"""
Shopstats API
FastAPI application serving the reporting endpoints.
"""
