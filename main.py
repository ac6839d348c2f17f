"""Entry point for the Social Media Extractor service."""

if __name__ == "__main__":
    import uvicorn
    from app.core.config import settings

    print(f"🚀 Starting {settings.api_title} v{settings.api_version}")
    print(f"🌐 Listening on port {settings.port}")
    print(f"⏱️ Fetch timeout: {settings.fetch_timeout}s")
    print(f"📝 Log level: {settings.log_level}")

    uvicorn.run(
        "app.main:app",  # Use string import for hot reload
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug_mode,
        log_level=settings.log_level.lower()
    )
