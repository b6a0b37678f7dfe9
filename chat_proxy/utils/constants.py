"""
Fixed values shared by the chat proxy routes and services.
"""

# Where the chatbot backend listens when CHATBOT_BACKEND_URL is not set
DEFAULT_CHATBOT_BACKEND_URL = "http://localhost:5000/api/chat"

# Body returned for every failure, whatever the cause
APPLICATION_NOT_FOUND_MESSAGE = "Application not found"

FORWARD_HEADERS = {
    "Content-Type": "application/json",
}
