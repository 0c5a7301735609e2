import os

DEFAULT_SAMPLE_DOCUMENT = (
    "https://hackrx.blob.core.windows.net/assets/policy.pdf?sv=2023-01-03"
    "&st=2025-07-04T09%3A11%3A24Z&se=2027-07-05T09%3A11%3A00Z&sr=b&sp=r"
    "&sig=N4a9OU0w0QXO6AOIBiu4bpl7AXvEZogeT%2FjUHNO7HzQ%3D"
)

class Config:
    # Remote query API
    API_BASE_URL = os.getenv("HACKRX_API_BASE_URL", "http://localhost:8000/api/v1")
    RUN_PATH = "/hackrx/run"
    
    # Authentication
    AUTH_TOKEN = os.getenv("HACKRX_AUTH_TOKEN", "")
    
    # Request timeout in milliseconds, covers the whole call
    TIMEOUT_MS = int(os.getenv("HACKRX_TIMEOUT_MS", "30000"))
    
    # Document analyzed when the caller does not upload one
    DEFAULT_DOCUMENT_URL = os.getenv("HACKRX_DEFAULT_DOCUMENT_URL", DEFAULT_SAMPLE_DOCUMENT)
    
    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
