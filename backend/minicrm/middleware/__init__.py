"""
MiniCRM Backend — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Access Log] → [CORS] → [GZip] → Route Handler

    1. Access Log: correlation id, one line per request keyed by route template
    2. CORS: answer OPTIONS preflights, stamp CORS headers on everything else
    3. GZip: compress large list responses

    GZip sits inside CORS so it sees the handler's complete response bodies
    and leaves small ones (errors, messages) uncompressed. 404 and 500 bodies
    built by the handlers in main.py pass back through CORS and get the
    headers too.
"""
