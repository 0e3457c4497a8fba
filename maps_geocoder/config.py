import json
import logging
import os
import boto3

logger = logging.getLogger(__name__)

GEOCODER_CONFIG = {
    "format": os.environ.get("GEOCODER_FORMAT", "json"),
    "timeout": float(os.environ.get("GEOCODER_TIMEOUT", "30")),
    "connect_timeout": float(os.environ.get("GEOCODER_CONNECT_TIMEOUT", "5")),
    "language": os.environ.get("GEOCODER_LANGUAGE", ""),
    "region": os.environ.get("GEOCODER_REGION", ""),
}


def get_api_key() -> str | None:
    """Look up the Maps API key.

    GOOGLE_MAPS_API_KEY wins. Otherwise, if GOOGLE_MAPS_API_KEY_SECRET_ID names
    a Secrets Manager secret, its "api_key" field is used.
    """
    api_key = os.environ.get("GOOGLE_MAPS_API_KEY")
    if api_key:
        return api_key

    secret_id = os.environ.get("GOOGLE_MAPS_API_KEY_SECRET_ID")
    if not secret_id:
        return None

    logger.info(f"Fetching Maps API key from secret {secret_id}")
    client = boto3.client("secretsmanager")
    resp = client.get_secret_value(SecretId=secret_id)
    return json.loads(resp["SecretString"])["api_key"]
