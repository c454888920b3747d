"""
Argue Against the Machine API package.

Provides the FastAPI application for the legal debate service. The
application itself lives in api.app; it is not imported here so that
module routers can depend on api.dependencies without pulling in the app.
"""
