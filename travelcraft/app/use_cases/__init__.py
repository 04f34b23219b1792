"""
Use Cases

Organized into domain folders:
- auth/: Signup, signin, logout and session-to-user resolution
- posts/: Trip posts owned by the signed-in user
- contact/: Contact form messages
- chat/: Chatbot relay to hosted LLM providers
"""
