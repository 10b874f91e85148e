"""
Core package - Shared abstractions and utilities.

Provides the pieces every app's API layer relies on:
- Typed service errors (exceptions)
- JSON response envelopes (envelopes)
- Page slicing for list endpoints (pagination)
- NinjaAPI exception handlers that render errors as envelopes (handlers)
"""
