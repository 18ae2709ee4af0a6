"""Blich Studio CMS.

This package contains the content services behind the Blich Studio public
site and its admin console.

High-level architecture
-----------------------

The codebase is organized around two deployable applications that share one
core package:

- **CMS server** (``blich_cms.server``): a FastAPI service owning the content
  database. It exposes article CRUD under ``/api/v1/cms`` and the games,
  blog and studio endpoints under ``/api/cms`` (public reads) and
  ``/api/cms/admin`` (JWT protected writes).
- **API gateway** (``blich_cms.gateway``): a FastAPI service that never
  touches the database. It calls the CMS server over HTTP and reshapes the
  responses for the public site, both as REST (``/api/v1/content``) and as
  GraphQL (``/graphql``).

Core subpackages
----------------

- ``blich_cms.core``:

  - Logging and monitoring configuration.
  - Domain error types shared by both applications.
  - JWT and password helpers.
  - The SQLModel database layer (entities, repositories, session factory).
  - Pydantic I/O models describing the wire contract.
"""
