"""Sticker Catalog Service Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Serverless sticker catalog service using AWS Lambda, DynamoDB, and S3"
)

__all__ = ["handlers", "core"]
