"""
Serve the image API

Usage:
    python -m image_uploader.api
"""
import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "image_uploader.api.app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
