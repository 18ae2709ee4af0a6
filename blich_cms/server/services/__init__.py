"""
Service layer of the CMS server.

Services hold the business rules and raise ``blich_cms.core.errors`` types;
``deps`` wires them to FastAPI's dependency injection.
"""
