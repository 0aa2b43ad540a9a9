"""
Pydantic schema definitions for API payloads.

Request models are deliberately permissive about presence so that the
stores, not the framework, decide which fields are required and what
message to report.  Response models serialise with camelCase keys.
"""
