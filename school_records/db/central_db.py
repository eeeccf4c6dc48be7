"""Central MongoDB connection and collection registry"""
from pymongo import MongoClient
from pymongo.collection import Collection
from school_records.config.settings import DatabaseConfig, COLLECTIONS

_client = None

def get_mongo_client() -> MongoClient:
    """Get the shared MongoDB client (created lazily, pooled)."""
    global _client
    if _client is None:
        _client = MongoClient(DatabaseConfig.DB_URL, **DatabaseConfig.MONGO_CLIENT_CONFIG)
    return _client

def get_db():
    """Get MongoDB database with proper connection pooling."""
    return get_mongo_client()[DatabaseConfig.DB_NAME]

def get_collection(key: str) -> Collection:
    """Get collection by registry key, e.g. 'student_collection'."""
    if key not in COLLECTIONS:
        raise KeyError(f"Unknown collection: {key}")
    return get_db()[COLLECTIONS[key]]
