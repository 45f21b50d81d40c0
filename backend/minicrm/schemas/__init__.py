"""
MiniCRM Backend — Pydantic Request/Response Schemas
=====================================================

Each entity has three shapes:
    <Entity>Create  — POST body; optional fields are null-coalesced before binding
    <Entity>Update  — PUT body; every field is bound exactly as received
    <Entity>Read    — one row as returned by the API

Input models declare every field optional: presence of required columns is
checked by the store's NOT NULL constraints, not here.
"""
