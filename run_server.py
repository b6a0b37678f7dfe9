"""
Local launcher for the chat proxy.

Starts uvicorn with auto-reload and prints where requests are relayed.
"""

import uvicorn

from chat_proxy.config import settings

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Chat Proxy")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8000/health")
    print("   - Chat Relay:    POST http://localhost:8000/api/chat")
    print("   - API Docs:           http://localhost:8000/docs")
    print()
    print(f"➡️  Relaying to: {settings.CHATBOT_BACKEND_URL}")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/api/chat" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"message": "Hello"}\'')
    print()
    print("=" * 60)
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "chat_proxy.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.LOG_LEVEL.lower()
    )
