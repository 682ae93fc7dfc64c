"""
COMMANDS - Write operations

Subfolders:
- auth/          → register_user, login_user
- conversations/ → find_or_create_conversation, delete_conversation, restore_conversation
- chat/          → send_message
"""
