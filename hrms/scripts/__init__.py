"""
Scripts Module

Management utilities and CLI tools:
- User creation and password reset
- Reference data seeding (activity types, dashboard content, menu)
"""
