"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (register, login, conversations, messages)
- queries/   → Read operations (inbox, chat history)
- dto/       → Data Transfer Objects for the HTTP layer
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities, repositories, credential verifier
"""
