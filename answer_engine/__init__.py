"""Answer Engine backend: chatbot widget API and AEO content moderation."""
