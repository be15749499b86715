"""
FastAPI application exposing the image endpoints
"""
from fastapi import FastAPI

from image_uploader.api import images, search

app = FastAPI(
    title="Image Uploader API",
    description="Local image listing and random image search",
)

app.include_router(images.router)
app.include_router(search.router)
