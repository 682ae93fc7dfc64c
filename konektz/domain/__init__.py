"""
DOMAIN LAYER - The Heart of the Application

This layer contains:
- Entities: Business objects with identity (User, Conversation, Message)
- Value Objects: Immutable types (UserId, ConversationId, ParticipantPair)
- Ports: Interfaces that infrastructure implements
- Exceptions: The error taxonomy every layer raises

RULES:
1. NO framework imports (no FastAPI, SQLAlchemy, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
