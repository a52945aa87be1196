"""
Resource API - Pydantic Request/Response Schemas
==================================================

What:  The API contract: request bodies the routes accept and the row shapes
       they return.
How:   FastAPI validates request bodies against these models and serializes
       responses through them (OpenAPI docs are generated from them too).

Request bodies only check JSON shape and types. Whether referenced rows
exist, or required columns are present, is left to the database constraints;
those failures come back as 400 responses.
"""
