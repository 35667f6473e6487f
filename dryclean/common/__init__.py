"""
Cross-cutting helpers shared by the HTTP layer and the server entrypoint.
"""
