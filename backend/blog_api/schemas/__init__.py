"""
Request schemas, one submodule per resource (auth, post, comment).
Routers import from the submodules directly.
"""
