"""
FastAPI routers for the chat proxy.

chat.py relays /api/chat to the chatbot backend; health.py is the liveness probe.
"""
