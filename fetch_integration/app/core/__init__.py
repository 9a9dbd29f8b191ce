SERVICE_NAME = "fetch_integration"
