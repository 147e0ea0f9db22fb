"""Project service: projects and their members over HTTP."""
