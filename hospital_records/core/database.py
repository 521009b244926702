from pymongo import MongoClient
from pymongo.database import Database

from .config import settings

# One pooled client for the lifetime of the process. MongoClient connects
# lazily, so building it here does not touch the network.
client = MongoClient(
    settings.MONGODB_URI,
    serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
    connectTimeoutMS=settings.MONGODB_TIMEOUT_MS,
)

DOCTORS_COLLECTION = "doctors"
PATIENTS_COLLECTION = "patients"


# Database dependency
def get_db() -> Database:
    """Get the records database."""
    return client[settings.get_database_name]


def ping(db: Database) -> None:
    """Round-trip a ping to the store; raises PyMongoError when unreachable."""
    db.command("ping")


# Database initialization
def init_db():
    """Check the store is reachable before serving requests."""
    ping(get_db())
