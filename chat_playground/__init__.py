"""Chat Playground Service Application Package.

This package contains the core application components:
- models: Pydantic models for structured replies and chat options
- routers: API route handlers
- services: Chat model factory and prompting service
- utils: Prompt file loading
"""

__version__ = "0.1.0"
