import os
from dotenv import load_dotenv

# Load environment variables (only in development)
# In containers, environment variables are set directly
if os.getenv("ENVIRONMENT") != "production":
    load_dotenv()

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

# Extraction defaults
MAX_FILE_SIZE = int(os.getenv("FILETEXT_MAX_FILE_SIZE", str(100 * 1024 * 1024)))  # 100MB, 0 = unlimited
EXTRACT_TIMEOUT = float(os.getenv("FILETEXT_TIMEOUT", "30"))  # seconds, 0 = unlimited
OCR_LANGUAGE = os.getenv("FILETEXT_OCR_LANGUAGE", "eng")
PRESERVE_FORMATTING = os.getenv("FILETEXT_PRESERVE_FORMATTING", "false").lower() == "true"

# Image extractor size cap used when the call does not set one
IMAGE_MAX_FILE_SIZE = int(os.getenv("FILETEXT_IMAGE_MAX_FILE_SIZE", str(50 * 1024 * 1024)))  # 50MB

# Number of leading bytes inspected for MIME sniffing
SNIFF_BYTES = int(os.getenv("FILETEXT_SNIFF_BYTES", "8192"))

# Stream read chunk size (timeout is checked between chunks)
READ_CHUNK_SIZE = 64 * 1024

# HTTP API
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
