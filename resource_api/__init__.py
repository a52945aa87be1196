"""
Resource API - Package Initializer
====================================

REST backend for a resource-sharing / recommendation app.

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │              Services               │  ← one statement per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← pooled async sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
