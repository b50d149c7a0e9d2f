"""
Custom exceptions untuk API
"""
from fastapi import HTTPException


class MissingCredentialError(HTTPException):
    def __init__(self, name: str = "GOOGLE_API_KEY"):
        super().__init__(status_code=500, detail=f"{name} is not configured on the server.")


class InvalidUrlError(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=400,
            detail="URL could not be parsed. Provide a valid absolute URL."
        )


class UnsupportedSchemeError(HTTPException):
    def __init__(self):
        super().__init__(status_code=400, detail="Only HTTP and HTTPS URLs are supported.")
