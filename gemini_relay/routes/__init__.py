"""Route blueprints package for API endpoints.

Holds the Flask blueprint for the generation routes (text, image,
document, audio). The module documents its endpoint JSON contracts.
"""
