import os

os.environ.setdefault("GEOCODER_FORMAT", "json")
os.environ.setdefault("GEOCODER_TIMEOUT", "30")
os.environ.setdefault("GEOCODER_CONNECT_TIMEOUT", "5")
os.environ.setdefault("GEOCODER_LANGUAGE", "")
os.environ.setdefault("GEOCODER_REGION", "")
