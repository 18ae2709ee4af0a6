"""Constants of the CMS server."""

PROJECT_NAME = "Blich CMS"
API_V1_STR = "/api/v1"
CMS_API_V1_STR = f"{API_V1_STR}/cms"
CMS_CONTENT_STR = "/api/cms"
CMS_ADMIN_STR = f"{CMS_CONTENT_STR}/admin"
AUTH_STR = "/api/auth"
