"""
Blich API Gateway Package.

Public facing API of the studio website. Reads content from the CMS server
over HTTP and exposes it as REST pass-through endpoints and a GraphQL schema.
"""
