import os

# Modules read configuration at import time; tests never reach a real
# database or HubSpot, so placeholder values are enough.
os.environ.setdefault("MYSQL_USER", "test")
os.environ.setdefault("MYSQL_PASSWORD", "test")
os.environ.setdefault("MYSQL_HOST", "localhost")
os.environ.setdefault("MYSQL_DATABASE", "hubspot_test")
os.environ.setdefault("HUBSPOT_CLIENT_ID", "client-id")
os.environ.setdefault("HUBSPOT_CLIENT_SECRET", "client-secret")
os.environ.setdefault("HUBSPOT_REDIRECT_URI", "http://localhost:8000/hubspot/oauth/callback")
os.environ.setdefault("HUBSPOT_DEVELOPER_API_KEY", "dev-key")
os.environ.setdefault("HUBSPOT_APP_ID", "424242")
os.environ.setdefault("API_BASE_URL", "https://disassociate.example.com")
