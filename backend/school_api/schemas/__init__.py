# Schemas package init
"""
School Records API: Request and Response Schemas
==================================================

What:  Pydantic models for the JSON bodies the API reads and writes.
How:   Each entity has an input schema (`SchoolIn`, `ClassIn`, `StudentIn`)
       that decodes a request body and builds the ORM object through
       `to_model()`, and a response schema read from ORM attributes.
       `common` holds the shared error, message and health bodies.
"""
