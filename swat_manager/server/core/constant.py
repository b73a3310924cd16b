"""Static constants shared by the HTTP layer."""

PROJECT_NAME = "SWAT Manager"
API_V1_STR = "/api/v1"
