"""
Feature modules for LearnHub backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- service.py: Business logic implementation
- repository.py: Supabase access, where the module owns a table
- exceptions.py: Module-specific exceptions

HTTP routes live in api/routes and depend only on the interfaces.
"""
