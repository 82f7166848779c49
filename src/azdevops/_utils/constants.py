# Environment variables
ENV_AZURE_DEVOPS_PAT = "AZURE_DEVOPS_EXT_PAT"
ENV_SYSTEM_ACCESS_TOKEN = "SYSTEM_ACCESSTOKEN"
ENV_COLLECTION_URI = "SYSTEM_COLLECTIONURI"
ENV_ORGANIZATION = "AZURE_DEVOPS_ORG"
ENV_PROJECT = "SYSTEM_TEAMPROJECT"
ENV_RETRY_COUNT = "AZURE_DEVOPS_RETRY_COUNT"
ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_TEXT = "text/plain"

# REST API
AZURE_DEVOPS_URL = "https://dev.azure.com"
API_VERSION = "7.0"
RETRY_DELAY_SECONDS = 0.5

LOGGER_NAME = "azdevops"
