"""Version 1 routers of the CMS server."""
