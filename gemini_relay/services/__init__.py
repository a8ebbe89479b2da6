"""Service layer package housing the request-to-model logic.

Contains the Gemini model client wrapper and the dispatcher that maps
each route's inputs onto a single model call.
"""
