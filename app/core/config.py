import os

# Database Configuration
# Uses default credentials for local Docker Compose setup
DB_URL = os.getenv("DATABASE_URL", "postgres://user:password@db:5432/stockroom_db")
GENERATE_SCHEMAS = os.getenv("GENERATE_SCHEMAS", "true").lower() == "true"

# Application Metadata
PROJECT_NAME = "Stockroom Inventory Service"
VERSION = "1.0.0"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Identity is verified upstream; the gateway forwards it in these headers
USER_ID_HEADER = os.getenv("USER_ID_HEADER", "X-User-Id")
USER_EMAILS_HEADER = os.getenv("USER_EMAILS_HEADER", "X-User-Emails")

# Inventory / dashboard behaviour
DEFAULT_INVENTORY_NAME = "Main Inventory"
DEFAULT_INVENTORY_DESCRIPTION = "Default inventory"
DEFAULT_LOW_STOCK_AT = int(os.getenv("DEFAULT_LOW_STOCK_AT", 10))
RECENT_PRODUCTS_LIMIT = int(os.getenv("RECENT_PRODUCTS_LIMIT", 5)) # Products shown on the stock levels widget
HISTOGRAM_WEEKS = 12 # Fixed dashboard window, W1..W12
