"""
Core Module

Shared application components including:
- Configuration management
- Logging configuration
- Error types and handlers
- Password hashing and session tokens
- Dependency injection for FastAPI
"""
